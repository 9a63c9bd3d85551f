"""A fixed-size hash map of string keys and values with chained buckets."""

from __future__ import annotations

from typing import Optional

PRIME_MULTIPLIER = 37
_ULONG_MASK = 2**64 - 1


def hash_key(key: str, size: int) -> int:
    """Return the bucket index of ``key`` in a table of ``size`` buckets.

    The key's UTF-8 bytes are folded as signed characters into a 64-bit
    unsigned accumulator: ``value = value * 37 + byte``.
    """
    if size <= 0:
        raise ValueError(f"size must be positive: {size}")
    value = 0
    for byte in key.encode("utf-8"):
        signed = byte - 256 if byte >= 128 else byte
        value = (value * PRIME_MULTIPLIER + signed) & _ULONG_MASK
    return value % size


class HashMap:
    """String-to-string map with a fixed number of buckets.

    Inserting a key that is already present shadows the older entry.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"size must be positive: {size}")
        self.size = size
        self._buckets: list[list[tuple[str, str]]] = [[] for _ in range(size)]

    def insert(self, key: str, value: str) -> None:
        """Add ``key`` with ``value`` at the front of its bucket."""
        self._buckets[hash_key(key, self.size)].insert(0, (key, value))

    def get(self, key: str) -> Optional[str]:
        """Return the most recently inserted value for ``key``, or None."""
        bucket = self._buckets[hash_key(key, self.size)]
        return next((value for k, value in bucket if k == key), None)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)