"""A list made of fixed-size buckets chained one after another."""

from __future__ import annotations

from typing import Generic, Iterator, List, TypeVar

T = TypeVar("T")


class Bucket(Generic[T]):
    """A fixed number of slots, filled from the front."""

    def __init__(self, slots: int = 1) -> None:
        if slots < 1:
            raise ValueError("a bucket needs at least one slot")
        self.slots = slots
        self._items: List[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, pos: int) -> T:
        return self._items[pos]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Bucket(slots={self.slots}, items={self._items!r})"

    def is_full(self) -> bool:
        return len(self._items) >= self.slots

    def remaining_slots(self) -> int:
        return self.slots - len(self._items)

    def insert(self, item: T) -> None:
        """Store ``item`` in the next free slot."""
        if self.is_full():
            raise OverflowError("bucket is full")
        self._items.append(item)

    def delete(self, index: int) -> bool:
        """Remove the item at ``index`` by moving the last item into its place.

        Returns True when the bucket is empty afterwards.
        """
        if not 0 <= index < len(self._items):
            raise IndexError(f"bucket index {index} out of range")
        self._items[index] = self._items[-1]
        self._items.pop()
        return not self._items

    def clear(self) -> None:
        self._items.clear()


class BucketList(Generic[T]):
    """Items stored in buckets of ``bucket_size // data_size`` slots each."""

    def __init__(self, bucket_size: int, data_size: int) -> None:
        if data_size <= 0:
            raise ValueError("data size must be positive")
        if data_size > bucket_size:
            raise ValueError("data size is larger than bucket size")
        self._slots = bucket_size // data_size
        self._buckets: List[Bucket[T]] = [Bucket(self._slots)]
        self._total_items = 0

    def __len__(self) -> int:
        return self._total_items

    def __iter__(self) -> Iterator[T]:
        for bucket in self._buckets:
            yield from bucket

    def __getitem__(self, pos: int) -> Bucket[T]:
        if not 0 <= pos < len(self._buckets):
            raise IndexError(f"bucket position {pos} out of range")
        return self._buckets[pos]

    def __repr__(self) -> str:
        return f"BucketList({list(self)!r})"

    def total_buckets(self) -> int:
        return len(self._buckets)

    def buckets(self) -> Iterator[Bucket[T]]:
        return iter(self._buckets)

    def first(self) -> Bucket[T]:
        return self._buckets[0]

    def last(self) -> Bucket[T]:
        return self._buckets[-1]

    def append(self, item: T) -> None:
        """Add ``item`` to the tail bucket, opening a new bucket when it is full."""
        if self._buckets[-1].is_full():
            self._buckets.append(Bucket(self._slots))
        self._buckets[-1].insert(item)
        self._total_items += 1

    def delete_bucket(self, pos: int) -> None:
        """Drop the bucket at ``pos`` with all its items.

        The only bucket of a list is emptied rather than removed.
        """
        bucket = self[pos]
        self._total_items -= len(bucket)
        if len(self._buckets) > 1:
            del self._buckets[pos]
        else:
            bucket.clear()

    def delete_last_bucket(self) -> None:
        self.delete_bucket(len(self._buckets) - 1)

    def extend_from(self, other: BucketList[T]) -> BucketList[T]:
        """Move every item of ``other`` to the end of this list, leaving ``other`` empty.

        The free slots of this list's tail bucket are first filled with items
        taken from the end of ``other``; the remaining buckets are then chained on.
        """
        if other is self:
            raise ValueError("a list cannot be concatenated with itself")
        donors = other._buckets
        tail = self._buckets[-1]
        while not tail.is_full() and other._total_items:
            source = donors[-1]
            if not len(source):
                donors.pop()
                continue
            last = len(source) - 1
            tail.insert(source[last])
            source.delete(last)
            if not len(source) and len(donors) > 1:
                donors.pop()
        self._buckets.extend(bucket for bucket in donors if len(bucket))
        self._total_items += other._total_items
        other._buckets = [Bucket(other._slots)]
        other._total_items = 0
        return self

    def __iadd__(self, other: BucketList[T]) -> BucketList[T]:
        return self.extend_from(other)