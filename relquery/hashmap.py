"""A fixed-size hash map with linear probing and deletion markers."""

from __future__ import annotations

from typing import Callable, Generic, Hashable, Iterator, List, Optional, Tuple, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class HashMapFullError(Exception):
    """Raised when a key cannot be placed in the map."""


class HashMap(Generic[K, V]):
    """Open addressing over ``size`` slots.

    Probing starts at ``hash_function(key) % size`` and walks forward, wrapping
    around, but never reaches the slot just before the starting one.
    """

    def __init__(self, size: int = 1000, hash_function: Callable[[K], int] = hash) -> None:
        if size < 0:
            raise ValueError("size cannot be negative")
        self._size = size
        self._hash = hash_function
        self._slots: List[Optional[Tuple[K, V]]] = [None] * size
        self._deleted: List[bool] = [False] * size
        self._used = 0

    def __len__(self) -> int:
        return self._used

    def hashed_value(self, key: K) -> int:
        return self._hash(key) % self._size

    def _probe(self, key: K) -> Iterator[int]:
        start = self.hashed_value(key)
        end = (start - 1) % self._size
        pos = start
        while pos != end:
            yield pos
            pos = (pos + 1) % self._size

    def set(self, key: K, value: V) -> None:
        """Store a new key; an existing key raises KeyError."""
        if self._used + 1 > self._size:
            raise HashMapFullError("hash map is full")
        for pos in self._probe(key):
            entry = self._slots[pos]
            if entry is None:
                self._slots[pos] = (key, value)
                self._deleted[pos] = False
                self._used += 1
                return
            if entry[0] == key:
                raise KeyError(key)
        raise HashMapFullError("no free slot reachable for key")

    def _find(self, key: K, honour_deleted: bool) -> int:
        if self._used == 0:
            raise KeyError(key)
        for pos in self._probe(key):
            entry = self._slots[pos]
            if entry is None:
                if not (honour_deleted and self._deleted[pos]):
                    raise KeyError(key)
            elif entry[0] == key:
                return pos
        raise KeyError(key)

    def get(self, key: K) -> V:
        entry = self._slots[self._find(key, honour_deleted=True)]
        assert entry is not None
        return entry[1]

    def delete_key(self, key: K) -> V:
        """Remove ``key`` and return its value."""
        pos = self._find(key, honour_deleted=True)
        entry = self._slots[pos]
        assert entry is not None
        self._slots[pos] = None
        self._deleted[pos] = True
        self._used -= 1
        return entry[1]

    def load(self) -> float:
        return 0.0 if self._size == 0 else self._used / self._size

    def array_index(self, key: K) -> int:
        """Slot holding ``key``; the search stops at any empty slot."""
        return self._find(key, honour_deleted=False)

    def items(self) -> Iterator[Tuple[K, V]]:
        """Stored pairs in slot order."""
        for entry in self._slots:
            if entry is not None:
                yield entry