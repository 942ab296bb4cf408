"""Records shared by the loader, the join code and the predicate evaluator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

COMPARISONS = ("<", ">", "=")


@dataclass
class Stats:
    """Statistics kept for one column of a relation."""

    l_lower: int = 0
    u_upper: int = 0
    f_all: int = 0
    d_distinct: int = 0
    distinct_array: List[bool] = field(default_factory=list)
    n: int = 0


@dataclass
class RelationTable:
    """A relation stored column by column: ``table[col][row]``."""

    table: List[List[int]] = field(default_factory=list)
    table_id: int = 0
    col_stats: Optional[List[Stats]] = None

    def __post_init__(self) -> None:
        lengths = {len(column) for column in self.table}
        if len(lengths) > 1:
            raise ValueError("all columns of a relation must have the same length")

    @property
    def rows(self) -> int:
        return len(self.table[0]) if self.table else 0

    @property
    def cols(self) -> int:
        return len(self.table)


@dataclass(frozen=True)
class JoinPred:
    """``rel1.col_rel1 = rel2.col_rel2``."""

    rel1: int
    col_rel1: int
    rel2: int
    col_rel2: int


@dataclass(frozen=True)
class CompPred:
    """``rel1.col_rel1 <comp> num`` where ``comp`` is one of ``<``, ``>``, ``=``."""

    comp: str
    rel1: int
    col_rel1: int
    num: int

    def __post_init__(self) -> None:
        if self.comp not in COMPARISONS:
            raise ValueError(f"unknown comparison {self.comp!r}")


@dataclass(frozen=True)
class Projection:
    """A column ``rel.col_rel`` whose sum a query reports."""

    rel: int
    col_rel: int


@dataclass
class Query:
    """One query: the relations it uses, its predicates and its projections."""

    relations: List[RelationTable] = field(default_factory=list)
    comp_preds: List[CompPred] = field(default_factory=list)
    join_preds: List[JoinPred] = field(default_factory=list)
    projections: List[Projection] = field(default_factory=list)

    @property
    def total_rels(self) -> int:
        return len(self.relations)


@dataclass
class ResStruct:
    """The surviving row ids of one relation of a query."""

    table_id: int
    row_ids: List[int] = field(default_factory=list)


@dataclass
class FullResList:
    """Relations already joined together; their row id lists line up position by position."""

    table_list: List[ResStruct] = field(default_factory=list)


@dataclass(frozen=True)
class MergeTuple:
    """A join key with the row it came from."""

    key: int
    row_id: int