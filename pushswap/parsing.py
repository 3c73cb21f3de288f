"""Turning command-line arguments into the starting contents of stack ``a``."""

from __future__ import annotations

from collections.abc import Iterable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_DIGITS = frozenset("0123456789")


class InputError(ValueError):
    """The arguments do not describe a valid stack of distinct integers."""


def split_args(args: Iterable[str]) -> list[str]:
    """Join the arguments with spaces and split them into space-separated words.

    Only the space character separates words; tabs and other whitespace
    stay inside the words they appear in.
    """
    return [word for word in " ".join(args).split(" ") if word]


def is_number(token: str) -> bool:
    """True when ``token`` is an optional sign followed by one or more ASCII digits."""
    digits = token[1:] if token[:1] in ("+", "-") else token
    return bool(digits) and all(ch in _DIGITS for ch in digits)


def parse_int(token: str) -> int:
    """Return the integer written in ``token``.

    Raise InputError if it is not a number or does not fit in a signed
    32-bit integer.
    """
    if not is_number(token):
        raise InputError(f"not an integer: {token!r}")
    value = int(token)
    if not INT_MIN <= value <= INT_MAX:
        raise InputError(f"integer out of range: {token!r}")
    return value


def parse_stack(args: Iterable[str]) -> list[int]:
    """Return the values for stack ``a``, top first, read from ``args``.

    Raise InputError when a word is not an integer, is out of range,
    repeats an earlier value, or when there are no words at all.
    """
    tokens = split_args(args)
    if not any(not is_number(token) for token in tokens):
        pass
    else:
        bad = next(token for token in tokens if not is_number(token))
        raise InputError(f"not an integer: {bad!r}")
    values: list[int] = []
    seen: set[int] = set()
    for token in tokens:
        value = parse_int(token)
        if value in seen:
            raise InputError(f"duplicate value: {value}")
        seen.add(value)
        values.append(value)
    if not values:
        raise InputError("no values given")
    return values