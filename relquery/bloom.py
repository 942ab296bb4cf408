"""A bloom filter over 64-bit integers and a few 32-bit hash functions for it."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Sequence

M32 = 0xFFFFFFFF
M64 = 0xFFFFFFFFFFFFFFFF

HashFunction = Callable[[int], int]


class BloomFilter:
    """A bit array of ``cells`` cells set by each of ``hash_functions``."""

    def __init__(self, cells: int, hash_functions: Sequence[HashFunction]) -> None:
        if cells <= 0:
            raise ValueError("a bloom filter needs at least one cell")
        self._cells: List[bool] = [False] * cells
        self._hash_functions = list(hash_functions)

    def _positions(self, value: int) -> Iterable[int]:
        return (fn(value) % len(self._cells) for fn in self._hash_functions)

    def add(self, value: int) -> bool:
        """Set the cells for ``value``; True when all of them were already set."""
        seen = True
        for pos in self._positions(value):
            seen &= self._cells[pos]
            self._cells[pos] = True
        return seen

    def __contains__(self, value: int) -> bool:
        return all(self._cells[pos] for pos in self._positions(value))


def djb2(value: int) -> int:
    value &= M64
    h = ((5381 << 5) + 5381) & M32
    return (h + (value >> 10) - (value << 3)) & M32


def sdbm(value: int) -> int:
    value &= M64
    h = 0
    return (((h << 7) + (h << 12) - (h >> 5)) + value) & M32


def super_fast_hash(value: int) -> int:
    data = value & M64
    h = 64
    # 64 is a multiple of 4, so there is no tail to mix in.
    for _ in range(64 >> 2):
        h = (h + (data & 0xFFFF)) & M32
        tmp = ((((data & 0xFFFF) + 2) << 11) ^ h) & M32
        h = ((h << 16) ^ tmp) & M32
        data = (data + 4) & M64
        h = (h + (h >> 11)) & M32

    h ^= (h << 3) & M32
    h = (h + (h >> 5)) & M32
    h ^= (h << 4) & M32
    h = (h + (h >> 17)) & M32
    h ^= (h << 25) & M32
    h = (h + (h >> 6)) & M32
    return h


def count_distinct(values: Iterable[int], cells: int, hash_functions: Sequence[HashFunction]) -> int:
    """Count the values the filter first reported as new and never saw again.

    A value the filter reports as already present is dropped from the count.
    """
    bloom = BloomFilter(cells, hash_functions)
    fresh: Dict[int, bool] = {}
    for value in values:
        if bloom.add(value):
            fresh.pop(value, None)
        else:
            fresh[value] = True
    return len(fresh)