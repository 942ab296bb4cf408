"""Evaluating join predicates whose relations meet in the same intermediate result."""

from __future__ import annotations

from typing import List, MutableSequence, Sequence

from relquery.predicates import find_in_res_list
from relquery.structs import FullResList, JoinPred, RelationTable, ResStruct


def join_self(
    relations: Sequence[RelationTable],
    jpred: JoinPred,
    res_list: MutableSequence[FullResList],
) -> ResStruct:
    """Keep the rows of ``jpred.rel1`` whose two joined columns hold equal values.

    The same row id is used on both sides of the predicate. A relation not yet
    in ``res_list`` starts from all of its rows and is added as a new entry.
    Only the entry of ``jpred.rel1`` is filtered. Row order is preserved.
    """
    left = relations[jpred.rel1].table[jpred.col_rel1]
    right = relations[jpred.rel2].table[jpred.col_rel2]

    res = None
    for full in res_list:
        res = find_in_res_list(full.table_list, jpred.rel1)
        if res is not None:
            break
    if res is None:
        res = ResStruct(table_id=jpred.rel1, row_ids=list(range(relations[jpred.rel1].rows)))
        res_list.append(FullResList(table_list=[res]))

    res.row_ids = [row for row in res.row_ids if left[row] == right[row]]
    return res


def join_in_same_bucket(
    relations: Sequence[RelationTable],
    jpred: JoinPred,
    rel1: ResStruct,
    rel2: ResStruct,
    full_res: FullResList,
) -> None:
    """Filter ``full_res`` by a join between two relations it already holds.

    ``rel1`` and ``rel2`` are entries of ``full_res``; their row id lists line
    up position by position. A position survives when the joined values match,
    and it is kept or dropped in every relation of ``full_res`` alike.
    """
    if len(rel1.row_ids) != len(rel2.row_ids):
        raise ValueError("row id lists of the same result must have equal length")
    if not rel1.row_ids:
        return

    left = relations[jpred.rel1].table[jpred.col_rel1]
    right = relations[jpred.rel2].table[jpred.col_rel2]
    keep: List[int] = [
        pos
        for pos, (row1, row2) in enumerate(zip(rel1.row_ids, rel2.row_ids))
        if left[row1] == right[row2]
    ]
    for res in full_res.table_list:
        old = res.row_ids
        res.row_ids = [old[pos] for pos in keep]