"""Turning command-line arguments into a stack of ranked values."""

from __future__ import annotations

from typing import Iterable, Sequence

from .stack import Node, Stack

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_MAX_DIGITS = 10


class ParseError(ValueError):
    """Raised when the arguments do not describe a valid set of integers."""


def skip_spaces(text: str) -> str:
    """Return ``text`` without its leading space characters."""
    return text.lstrip(" ")


def atol(text: str) -> int:
    """Read a leading, optionally signed, decimal integer from ``text``.

    Leading spaces are skipped and reading stops at the first non-digit;
    text with no digits reads as zero.
    """
    rest = skip_spaces(text)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if not ("0" <= char <= "9"):
            break
        digits.append(char)
    if not digits:
        return 0
    return sign * int("".join(digits))


def is_valid_number(text: str) -> bool:
    """Tell whether ``text`` is an integer of at most ten significant digits.

    Leading spaces and an optional sign are allowed, leading zeros do not
    count towards the limit, and spaces may follow each digit.
    """
    rest = skip_spaces(text)
    if rest[:1] in ("+", "-"):
        rest = rest[1:]
    if not rest:
        return False
    rest = rest.lstrip("0")
    count = 0
    while rest:
        if not ("0" <= rest[0] <= "9"):
            return False
        rest = skip_spaces(rest[1:])
        count += 1
        if count > _MAX_DIGITS:
            return False
    return True


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    return [word for word in text.split(sep) if word]


def _parse_number(text: str) -> int:
    if not is_valid_number(text):
        raise ParseError(f"not a valid integer: {text!r}")
    value = atol(text)
    if not INT_MIN <= value <= INT_MAX:
        raise ParseError(f"integer out of range: {text!r}")
    return value


def _collect(args: Iterable[str], values: list[int], seen: set[int]) -> None:
    for arg in args:
        if len(split_words(arg, " ")) > 1:
            _collect(split_words(arg, " "), values, seen)
            continue
        value = _parse_number(arg)
        if value in seen:
            raise ParseError(f"duplicate value: {value}")
        seen.add(value)
        values.append(value)


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Read every integer out of ``args`` in order.

    An argument holding several space-separated words contributes each of
    them. Invalid numbers, values outside the 32-bit signed range and
    duplicates raise :class:`ParseError`.
    """
    values: list[int] = []
    _collect(args, values, set())
    return values


def rank_values(values: Sequence[int]) -> list[int]:
    """Replace each value by its rank, 1 for the smallest, keeping order."""
    order = sorted(range(len(values)), key=lambda position: values[position])
    ranks = [0] * len(values)
    for rank, position in enumerate(order, start=1):
        ranks[position] = rank
    return ranks


def build_stack(args: Iterable[str]) -> Stack:
    """Parse ``args`` and return a stack holding the ranks of the values."""
    return Stack(Node(rank) for rank in rank_values(parse_arguments(args)))