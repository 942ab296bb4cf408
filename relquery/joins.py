"""Helpers for sort-merge joins over column-stored relations."""

from __future__ import annotations

from typing import List, MutableSequence, Sequence, Tuple

from relquery.structs import MergeTuple

M32 = 0xFFFFFFFF
M64 = 0xFFFFFFFFFFFFFFFF


def bit_conversion(num: int, key: int) -> int:
    """Byte ``key`` of the 64-bit ``num``, counting from the most significant byte."""
    if not 0 <= key <= 7:
        raise ValueError("key must be between 0 and 7")
    return ((num & M64) >> ((7 - key) * 8)) & 0xFF


def switch_elements(table: Sequence[MutableSequence[int]], first: int, second: int) -> None:
    """Swap rows ``first`` and ``second`` in every column of ``table``."""
    for column in table:
        column[first], column[second] = column[second], column[first]


def pack_row_ids(row_id1: int, row_id2: int) -> int:
    """Combine two 32-bit row ids into one 64-bit value, the first in the high half."""
    for row_id in (row_id1, row_id2):
        if not 0 <= row_id <= M32:
            raise ValueError(f"row id {row_id} does not fit in 32 bits")
    return (row_id1 << 32) | row_id2


def unpack_row_ids(entry: int) -> Tuple[int, int]:
    return (entry >> 32) & M32, entry & M32


def merge_tables(sorted1: Sequence[MergeTuple], sorted2: Sequence[MergeTuple]) -> List[int]:
    """Join two key-sorted tables, returning packed ``(row_id1, row_id2)`` pairs."""
    size1, size2 = len(sorted1), len(sorted2)
    result: List[int] = []
    if not size1 or not size2:
        return result

    a = b = pin = 0
    while a < size1:
        key1, key2 = sorted1[a].key, sorted2[b].key
        if key1 == key2:
            result.append(pack_row_ids(sorted1[a].row_id, sorted2[b].row_id))
            b += 1
            # Rewind the second table so a repeated key in the first meets
            # the same matches again.
            if b == size2:
                b = pin
                a += 1
        elif key1 < key2:
            a += 1
            if a == size1:
                break
            if sorted1[a - 1].key == sorted1[a].key:
                b = pin
            else:
                pin = b
        else:
            b += 1
            if b == size2:
                break
    return result


def raise_to_power(value: int, power: int = 0) -> int:
    """``value ** power`` in unsigned 64-bit arithmetic; 1 for a power of zero or less."""
    if power <= 0:
        return 1
    return pow(value & M64, power, 1 << 64)