"""Conversions between decimal text and integers."""

from __future__ import annotations

from itertools import takewhile

from .chars import is_digit

_WHITESPACE = "\t\n\v\f\r "
_SIGNS = "+-"


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace is skipped and one optional sign is accepted. More
    than one sign makes the result 0. Parsing stops at the first character
    that is not an ASCII digit; no digits at all gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in _SIGNS and rest[:1]:
        if rest[1:2] and rest[1:2] in _SIGNS:
            return 0
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(is_digit, rest))
    return sign * int(digits) if digits else 0


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return f"{n:d}"