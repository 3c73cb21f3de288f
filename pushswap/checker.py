"""Checking whether a list of instructions sorts the given integers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from pushswap.parsing import InputError, parse_stack
from pushswap.stacks import Stacks, parse_operation


def check(values: Iterable[int], lines: Iterable[str]) -> bool:
    """Apply each instruction line to a fresh pair of stacks.

    Every line must be an operation name followed by a single newline.
    Return True when the stacks end up sorted with ``b`` empty; raise
    ValueError on the first line that is not a valid instruction.
    """
    stacks = Stacks(values)
    for line in lines:
        if not line.endswith("\n"):
            raise ValueError(f"instruction not terminated by a newline: {line!r}")
        stacks.apply(parse_operation(line[:-1]))
    return stacks.is_sorted()


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and print OK or KO."""
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
    try:
        result = check(values, sys.stdin)
    except ValueError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("OK\n" if result else "KO\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())