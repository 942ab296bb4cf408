"""A growable vector that keeps track of a notional capacity."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, List, TypeVar

T = TypeVar("T")


class MiniVector(Generic[T]):
    """Items in insertion order; capacity doubles when full."""

    def __init__(self, capacity: int = 1) -> None:
        if capacity < 0:
            raise ValueError("capacity cannot be negative")
        self._capacity = capacity
        self._items: List[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._items[index] = value

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"MiniVector({self._items!r})"

    def capacity(self) -> int:
        return self._capacity

    def push_back(self, item: T) -> None:
        if len(self._items) == self._capacity:
            self._capacity = 1 if self._capacity == 0 else 2 * self._capacity
        self._items.append(item)

    def remove(self, index: int) -> None:
        """Remove the item at ``index``, shifting later items down."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"vector index {index} out of range")
        del self._items[index]

    def remove_many(self, indexes: Iterable[int]) -> None:
        """Remove the items at all given positions at once."""
        doomed = set(indexes)
        for index in doomed:
            if not 0 <= index < len(self._items):
                raise IndexError(f"vector index {index} out of range")
        if doomed:
            self._items = [item for pos, item in enumerate(self._items) if pos not in doomed]

    def reserve(self, n: int, copy: bool) -> None:
        """Set the capacity to ``n``; without ``copy`` the current items are dropped."""
        if n < 0:
            raise ValueError("capacity cannot be negative")
        if copy:
            if n < len(self._items):
                raise ValueError("new capacity is smaller than the number of items")
        else:
            self._items = []
        self._capacity = n

    def reverse(self) -> None:
        """Reverse the items in place; the capacity shrinks to the item count."""
        self._items.reverse()
        self._capacity = len(self._items)