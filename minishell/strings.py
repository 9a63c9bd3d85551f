"""String helpers with C-library semantics expressed on Python strings.

Positions are returned as indices rather than pointers, and ``None`` stands
for "not found". As with C strings, a search for the terminating
``"\\0"`` finds the position just past the last character.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Optional

_NUL = "\0"


def strchr(s: str, c: str) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``.

    Searching for ``"\\0"`` gives ``len(s)``; a missing character gives None.
    """
    if c == _NUL:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``.

    Searching for ``"\\0"`` gives ``len(s)``; a missing character gives None.
    """
    if c == _NUL:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def _code_at(s: str, i: int) -> int:
    return ord(s[i]) if i < len(s) else 0


def strcmp(a: str, b: str) -> int:
    """Compare two strings character by character.

    Returns the code difference of the first differing pair, where the end of
    a string counts as code 0, or 0 when the strings are equal.
    """
    for i in range(max(len(a), len(b)) + 1):
        diff = _code_at(a, i) - _code_at(b, i)
        if diff:
            return diff
    return 0


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of ``a`` and ``b`` like :func:`strcmp`."""
    if n < 0:
        raise ValueError(f"n must not be negative: {n}")
    return strcmp(a[:n], b[:n]) if n else 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0; otherwise None when absent.
    """
    if length < 0:
        raise ValueError(f"length must not be negative: {length}")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strndup(s: str, n: int) -> str:
    """Return a copy of at most the first ``n`` characters of ``s``."""
    if n < 0:
        raise ValueError(f"n must not be negative: {n}")
    return s[:n]


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text, truncated to ``size - 1`` characters, and the
    full length of ``src`` so that truncation can be detected.
    """
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length it tried to create. When
    ``dst`` already fills the buffer it is returned unchanged and the length
    reported is ``size + len(src)``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    dst_len = min(len(dst), size)
    if dst_len == size:
        return dst, size + len(src)
    room = size - 1 - dst_len
    return dst + src[:room], dst_len + len(src)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(a: str, b: str) -> str:
    """Return ``a`` followed by ``b``."""
    return a + b


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return s.strip(charset) if charset else s


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to each character."""
    return "".join(func(i, ch) for i, ch in enumerate(s))


def striteri(
    s: MutableSequence[str], func: Callable[[int, str], str]
) -> MutableSequence[str]:
    """Replace each character of ``s`` in place with ``func(index, char)``.

    ``s`` must be a mutable sequence of characters such as a list; it is
    returned for convenience.
    """
    for i, ch in enumerate(s):
        s[i] = func(i, ch)
    return s