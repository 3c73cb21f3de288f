"""Computing a sequence of operations that sorts stack ``a``.

Each element of stack ``b`` is sent back to stack ``a`` on top of the
smallest greater value there. The element chosen each time is the one
that needs the fewest rotations to get both it and that value to the top.
"""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from pushswap.parsing import InputError, parse_stack
from pushswap.stacks import Operation


@dataclass(eq=False)
class _Node:
    value: int
    pos: int = 0
    mid: bool = False
    first: bool = False
    last: bool = False
    target: _Node | None = None


def _swap(stack: deque[_Node]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _push(src: deque[_Node], dst: deque[_Node]) -> None:
    if src:
        dst.appendleft(src.popleft())


def _rotate(stack: deque[_Node]) -> None:
    if len(stack) >= 2:
        stack.rotate(-1)


def _reverse_rotate(stack: deque[_Node]) -> None:
    if len(stack) >= 2:
        stack.rotate(1)


def _number(stack: deque[_Node]) -> int:
    """Give every node its 1-based position and return the stack size."""
    for pos, node in enumerate(stack, start=1):
        node.pos = pos
    return len(stack)


def _mark_halves(stack: deque[_Node]) -> None:
    """Flag the top node, the bottom node and the nodes of the lower half."""
    size = len(stack)
    nodes = list(stack)
    nodes[0].first = True
    if size == 1:
        return
    skip_middle = bool(size % 2)
    for node in nodes[1:-1]:
        if node.pos > size // 2:
            if skip_middle:
                skip_middle = False
            else:
                node.mid = True
    nodes[-1].last = True
    nodes[-1].mid = True


def _mark_ends(stack: deque[_Node]) -> _Node:
    """Refresh the top and bottom flags and return the node of greatest value."""
    bottom = len(stack) - 1
    for index, node in enumerate(stack):
        node.first = index == 0
        node.last = index == bottom
    return max(stack, key=lambda node: node.value)


def _reset(stack: deque[_Node]) -> None:
    for node in stack:
        node.first = node.last = node.mid = False
        node.pos = 0
        node.target = None


def _find_min(stack: deque[_Node]) -> _Node:
    _number(stack)
    return min(stack, key=lambda node: node.value)


def _mean(stack: deque[_Node]) -> int:
    """Mean of the values, rounded toward zero."""
    total = sum(node.value for node in stack)
    quotient = abs(total) // len(stack)
    return -quotient if total < 0 else quotient


def _set_targets(a: deque[_Node], b: deque[_Node]) -> None:
    for node in b:
        greater = [candidate for candidate in a if candidate.value > node.value]
        node.target = min(greater, key=lambda candidate: candidate.value, default=None)


def _cost(node: _Node, size_b: int, size_a: int) -> int:
    target = node.target
    up_b, down_b = node.pos - 1, size_b - node.pos + 1
    up_a, down_a = target.pos - 1, size_a - target.pos + 1
    cost = (down_b if node.mid else up_b) + (down_a if target.mid else up_a)
    if node.mid and target.mid:
        cost -= min(down_b, down_a)
    if not node.mid and not target.mid:
        cost -= min(up_b, up_a)
    return cost


def _cheapest(b: deque[_Node], size_b: int, size_a: int) -> _Node:
    cheapest = None
    best = 0
    for node in b:
        cost = _cost(node, size_b, size_a)
        if cost < best or best == 0:
            best = cost
            cheapest = node
    return cheapest


class _Sorter:
    """Both stacks as nodes, together with the operations carried out so far."""

    def __init__(self, values: Sequence[int]) -> None:
        self.a: deque[_Node] = deque(
            _Node(value, pos=index) for index, value in enumerate(values)
        )
        self.b: deque[_Node] = deque()
        self.ops: list[Operation] = []

    def do(self, op: Operation) -> None:
        self.ops.append(op)
        a, b = self.a, self.b
        if op in (Operation.SA, Operation.SS):
            _swap(a)
        if op in (Operation.SB, Operation.SS):
            _swap(b)
        if op is Operation.PA:
            _push(b, a)
        if op is Operation.PB:
            _push(a, b)
        if op in (Operation.RA, Operation.RR):
            _rotate(a)
        if op in (Operation.RB, Operation.RR):
            _rotate(b)
        if op in (Operation.RRA, Operation.RRR):
            _reverse_rotate(a)
        if op in (Operation.RRB, Operation.RRR):
            _reverse_rotate(b)

    def sort_three(self) -> None:
        highest = _mark_ends(self.a)
        if self.a[0] is highest:
            self.do(Operation.RA)
        elif self.a[1] is highest:
            self.do(Operation.RRA)
        if self.a[0].value > self.a[1].value:
            self.do(Operation.SA)

    def _step(self, node: _Node) -> None:
        target = node.target
        if not node.mid and not target.mid:
            if not node.first and not target.first:
                self.do(Operation.RR)
                return
            if not node.first:
                self.do(Operation.RB)
            if not target.first:
                self.do(Operation.RA)
        elif node.mid and target.mid:
            if node.last == target.last:
                self.do(Operation.RRR)
                return
            if not node.last:
                self.do(Operation.RRB)
            if not target.last:
                self.do(Operation.RRA)
        else:
            if not node.first:
                self.do(Operation.RRB if node.mid else Operation.RB)
            if not target.first:
                self.do(Operation.RRA if target.mid else Operation.RA)

    def _bring_back(self, node: _Node) -> None:
        while not node.first or not node.target.first:
            self._step(node)
            _mark_ends(self.a)
            _mark_ends(self.b)
        self.do(Operation.PA)
        _reset(self.a)
        _reset(self.b)

    def _finish(self) -> None:
        _number(self.a)
        _mark_halves(self.a)
        smallest = _find_min(self.a)
        while self.a[0] is not smallest:
            self.do(Operation.RRA if smallest.mid else Operation.RA)

    def sort_large(self) -> None:
        while len(self.a) > 3:
            if self.a[0].value < _mean(self.a):
                self.do(Operation.PB)
            else:
                self.do(Operation.RA)
        self.sort_three()
        while self.b:
            size_a = _number(self.a)
            size_b = _number(self.b)
            _mark_halves(self.a)
            _mark_halves(self.b)
            _set_targets(self.a, self.b)
            self._bring_back(_cheapest(self.b, size_b, size_a))
        self._finish()


def solve(values: Iterable[int]) -> list[Operation]:
    """Return the operations that sort ``values`` (top of stack ``a`` first).

    Raise ValueError if the values are not distinct.
    """
    values = list(values)
    if len(set(values)) != len(values):
        raise ValueError("values must be distinct")
    if all(x <= y for x, y in zip(values, values[1:])):
        return []
    sorter = _Sorter(values)
    if len(values) == 2:
        sorter.do(Operation.SA)
    if len(values) == 3:
        sorter.sort_three()
    else:
        sorter.sort_large()
    return sorter.ops


def main(argv: Sequence[str] | None = None) -> int:
    """Print, one per line, the operations that sort the integers given."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    if len(args) == 1 and not args[0]:
        sys.stderr.write("Error\n")
        return 0
    try:
        values = parse_stack(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{op}\n" for op in solve(values)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())