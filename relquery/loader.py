"""Reading relations from their binary files and queries from a workload file."""

from __future__ import annotations

import os
import re
import struct
from pathlib import Path
from typing import Iterable, Iterator, List, Sequence, Tuple, Union

from relquery.structs import CompPred, JoinPred, Projection, Query, RelationTable

PathLike = Union[str, "os.PathLike[str]"]

_HEADER = struct.Struct("<QQ")
_VALUE_SIZE = 8
_COLUMN_REF = re.compile(r"^(\d+)\.(\d+)$")
_PREDICATE = re.compile(r"^([^=<>]+)([=<>])(.*)$")


def read_relation(path: PathLike) -> RelationTable:
    """Load a relation file.

    The file holds the row count and the column count as 64-bit unsigned
    little-endian integers, followed by every column in turn.
    """
    data = Path(path).read_bytes()
    if len(data) < _HEADER.size:
        raise ValueError(f"{path}: missing relation header")
    rows, cols = _HEADER.unpack_from(data)
    count = rows * cols
    if len(data) < _HEADER.size + count * _VALUE_SIZE:
        raise ValueError(f"{path}: relation data is truncated")
    values = struct.unpack_from(f"<{count}Q", data, _HEADER.size)
    table = [list(values[col * rows:(col + 1) * rows]) for col in range(cols)]
    return RelationTable(table=table)


def read_relations(workloads_path: PathLike, names: Iterable[str]) -> List[RelationTable]:
    """Load each named relation file from ``workloads_path``, in the given order.

    Blank names are skipped; each relation's ``table_id`` is its position.
    """
    base = Path(workloads_path)
    relations: List[RelationTable] = []
    for name in names:
        name = name.strip()
        if not name:
            continue
        relation = read_relation(base / name)
        relation.table_id = len(relations)
        relations.append(relation)
    return relations


def _parse_column_ref(text: str) -> Tuple[int, int]:
    match = _COLUMN_REF.match(text.strip())
    if match is None:
        raise ValueError(f"malformed column reference {text!r}")
    return int(match.group(1)), int(match.group(2))


def _add_predicate(query: Query, text: str) -> None:
    match = _PREDICATE.match(text)
    if match is None:
        raise ValueError(f"malformed predicate {text!r}")
    rel1, col1 = _parse_column_ref(match.group(1))
    symbol = match.group(2)
    right = match.group(3).strip()
    if symbol == "=" and "." in right:
        rel2, col2 = _parse_column_ref(right)
        query.join_preds.append(JoinPred(rel1=rel1, col_rel1=col1, rel2=rel2, col_rel2=col2))
        return
    try:
        num = int(right)
    except ValueError:
        raise ValueError(f"malformed predicate {text!r}") from None
    if num < 0:
        raise ValueError(f"negative constant in predicate {text!r}")
    query.comp_preds.append(CompPred(comp=symbol, rel1=rel1, col_rel1=col1, num=num))


def parse_query(line: str, relations: Sequence[RelationTable]) -> Query:
    """Parse ``relations|predicates|projections`` into a query.

    Relations are indexes into ``relations``; predicates are joined by ``&``;
    projections are space separated ``rel.col`` references.
    """
    parts = line.rstrip("\r\n").split("|")
    if len(parts) != 3:
        raise ValueError(f"a query needs three '|' separated parts: {line!r}")
    tables, predicates, projections = parts

    rel_ids = [int(token) for token in tables.split()]
    if not rel_ids:
        raise ValueError(f"query names no relations: {line!r}")
    for rel_id in rel_ids:
        if not 0 <= rel_id < len(relations):
            raise IndexError(f"relation {rel_id} does not exist")

    query = Query(relations=[relations[rel_id] for rel_id in rel_ids])
    for predicate in predicates.split("&"):
        predicate = predicate.strip()
        if predicate:
            _add_predicate(query, predicate)
    query.projections = [Projection(*_parse_column_ref(ref)) for ref in projections.split()]
    return query


def iter_query_batches(path: PathLike, relations: Sequence[RelationTable]) -> Iterator[List[Query]]:
    """Yield the batches of a query file; each batch ends with a line ``F``.

    Queries after the last ``F`` do not form a batch and are dropped.
    """
    with open(path, "r", encoding="utf-8") as handle:
        batch: List[Query] = []
        for line in handle:
            stripped = line.strip()
            if stripped == "F":
                yield batch
                batch = []
            elif stripped:
                batch.append(parse_query(stripped, relations))