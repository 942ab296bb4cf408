"""Evaluating comparison predicates over the intermediate result of a query."""

from __future__ import annotations

import operator
from typing import Callable, Dict, Iterable, MutableSequence, Optional, Sequence, Tuple

from relquery.joins import unpack_row_ids
from relquery.structs import CompPred, FullResList, RelationTable, ResStruct

_COMPARATORS: Dict[str, Callable[[int, int], bool]] = {
    ">": operator.gt,
    "<": operator.lt,
    "=": operator.eq,
}


def find_in_res_list(res_list: Iterable[ResStruct], table_id: int) -> Optional[ResStruct]:
    """The first entry for ``table_id``, or None."""
    return next((res for res in res_list if res.table_id == table_id), None)


def find_in_res_vec(res_vec: Iterable[ResStruct], table_id: int) -> Optional[ResStruct]:
    """The first entry for ``table_id`` in a vector of entries, or None."""
    return find_in_res_list(res_vec, table_id)


def _locate(
    res_list: Iterable[FullResList], table_id: int
) -> Tuple[Optional[FullResList], Optional[ResStruct]]:
    for full in res_list:
        found = find_in_res_list(full.table_list, table_id)
        if found is not None:
            return full, found
    return None, None


def delete_targeted_sl(res: ResStruct, mask: int, double_keys: Iterable[int]) -> None:
    """Rebuild ``res.row_ids`` from the matched pairs in ``double_keys``.

    Each packed pair holds two positions into the current row ids; ``mask``
    0 picks the first (high) half and 1 the second (low) half.
    """
    if mask not in (0, 1):
        raise ValueError("mask must be 0 or 1")
    old = res.row_ids
    res.row_ids = [old[unpack_row_ids(key)[mask]] for key in double_keys]


def delete_targeted(full_res: FullResList, mask: int, double_keys: Iterable[int]) -> None:
    """Apply :func:`delete_targeted_sl` to every relation of ``full_res``."""
    keys = list(double_keys)
    for res in full_res.table_list:
        delete_targeted_sl(res, mask, keys)


def comparison_predicate(
    relations: Sequence[RelationTable],
    cpred: CompPred,
    res_list: MutableSequence[FullResList],
) -> ResStruct:
    """Keep only the rows of ``cpred.rel1`` that satisfy ``cpred``.

    A relation not yet in ``res_list`` starts from all of its rows and is
    added as a new entry. Row order is preserved.
    """
    test = _COMPARATORS[cpred.comp]
    relation = relations[cpred.rel1]
    column = relation.table[cpred.col_rel1]

    _, res = _locate(res_list, cpred.rel1)
    if res is None:
        res = ResStruct(table_id=cpred.rel1, row_ids=list(range(relation.rows)))
        res_list.append(FullResList(table_list=[res]))

    res.row_ids = [row for row in res.row_ids if test(column[row], cpred.num)]
    return res


def do_all_comp_preds(
    relations: Sequence[RelationTable],
    comp_preds: Iterable[CompPred],
    res_list: MutableSequence[FullResList],
    rel_exists: MutableSequence[bool],
) -> None:
    """Apply every comparison predicate and mark its relation as present."""
    for cpred in comp_preds:
        comparison_predicate(relations, cpred, res_list)
        rel_exists[cpred.rel1] = True