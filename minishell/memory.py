"""Byte-buffer helpers working on bytes-like objects.

Writing functions modify a ``bytearray`` in place and return it. Ranges
that reach past the end of a buffer raise ``IndexError``.
"""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

SIZE_MAX = 2**64 - 1


def _check_span(buffer: BytesLike, start: int, length: int, what: str) -> None:
    if length < 0:
        raise ValueError(f"{what} length must not be negative: {length}")
    if start < 0 or start + length > len(buffer):
        raise IndexError(
            f"{what} range [{start}, {start + length}) is outside a buffer of {len(buffer)} bytes"
        )


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buffer`` with the low byte of ``value``."""
    _check_span(buffer, 0, length, "buffer")
    buffer[:length] = bytes((value & 0xFF,)) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> bytearray:
    """Zero the first ``length`` bytes of ``buffer``."""
    return memset(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count`` objects of ``size`` bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray()
    if count > SIZE_MAX // size:
        raise MemoryError(f"allocation of {count} x {size} bytes overflows")
    return bytearray(count * size)


def memcpy(dst: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` into the start of ``dst``."""
    _check_span(dst, 0, n, "destination")
    _check_span(src, 0, n, "source")
    dst[:n] = memoryview(src)[:n].tobytes()
    return dst


def memmove(buffer: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Copy ``length`` bytes inside ``buffer`` from offset ``src`` to ``dst``.

    The ranges may overlap; the result is as if the source were copied first.
    """
    _check_span(buffer, src, length, "source")
    _check_span(buffer, dst, length, "destination")
    buffer[dst:dst + length] = buffer[src:src + length]
    return buffer


def memchr(data: BytesLike, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to the low byte of ``value``
    within the first ``n`` bytes, or None when there is none."""
    _check_span(data, 0, n, "search")
    index = memoryview(data)[:n].tobytes().find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b`` as unsigned values.

    Returns the difference of the first differing pair, or 0 when equal.
    """
    _check_span(a, 0, n, "first operand")
    _check_span(b, 0, n, "second operand")
    left = memoryview(a)[:n].tobytes()
    right = memoryview(b)[:n].tobytes()
    return next((x - y for x, y in zip(left, right) if x != y), 0)