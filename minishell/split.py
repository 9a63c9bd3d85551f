"""Splitting text into words on separator characters."""

from __future__ import annotations

from itertools import groupby

_NUL = "\0"


def _words(text: str, delimiters: frozenset[str]) -> list[str]:
    return [
        "".join(group)
        for is_delimiter, group in groupby(text, key=delimiters.__contains__)
        if not is_delimiter
    ]


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words.

    Runs of separators, and separators at either end, produce no empty
    strings. A separator of ``"\\0"`` never occurs inside text, so the whole
    text is one word.
    """
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    if sep == _NUL:
        return [text] if text else []
    return _words(text, frozenset(sep))


def split_mult(text: str, charset: str) -> list[str]:
    """Split ``text`` on any character of ``charset``, dropping empty words.

    An empty ``charset`` has no delimiters, so non-empty text is one word.
    """
    return _words(text, frozenset(charset))