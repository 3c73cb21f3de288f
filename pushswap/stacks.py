"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from enum import Enum


class Operation(str, Enum):
    """An instruction acting on stack ``a``, stack ``b`` or both."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def parse_operation(text: str) -> Operation:
    """Return the operation named by ``text``; raise ValueError if there is none."""
    try:
        return Operation(text)
    except ValueError:
        raise ValueError(f"unknown operation: {text!r}") from None


def _swap(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _push(src: deque[int], dst: deque[int]) -> None:
    if src:
        dst.appendleft(src.popleft())


def _rotate(stack: deque[int]) -> None:
    stack.rotate(-1)


def _reverse_rotate(stack: deque[int]) -> None:
    stack.rotate(1)


class Stacks:
    """Stacks ``a`` and ``b``; the top of each stack is its first element.

    Operations that cannot act (pushing from an empty stack, swapping or
    rotating fewer than two elements) leave the stacks unchanged.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def apply(self, op: Operation | str) -> None:
        """Carry out one operation, given as an Operation or by its name."""
        if not isinstance(op, Operation):
            op = parse_operation(op)
        a, b = self.a, self.b
        if op is Operation.SA:
            _swap(a)
        elif op is Operation.SB:
            _swap(b)
        elif op is Operation.SS:
            _swap(a)
            _swap(b)
        elif op is Operation.PA:
            _push(b, a)
        elif op is Operation.PB:
            _push(a, b)
        elif op is Operation.RA:
            _rotate(a)
        elif op is Operation.RB:
            _rotate(b)
        elif op is Operation.RR:
            _rotate(a)
            _rotate(b)
        elif op is Operation.RRA:
            _reverse_rotate(a)
        elif op is Operation.RRB:
            _reverse_rotate(b)
        else:
            _reverse_rotate(a)
            _reverse_rotate(b)

    def is_sorted(self) -> bool:
        """True when ``b`` is empty and ``a`` ascends from top to bottom."""
        if self.b:
            return False
        values = list(self.a)
        return all(x <= y for x, y in zip(values, values[1:]))