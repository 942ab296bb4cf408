import pytest

from relquery.joinpreds import join_in_same_bucket, join_self
from relquery.structs import FullResList, JoinPred, RelationTable, ResStruct


def _relations():
    r0 = RelationTable(table=[[1, 2, 3, 4], [1, 0, 3, 0]], table_id=0)
    r1 = RelationTable(table=[[5, 2, 3, 9], [7, 7, 7, 7]], table_id=1)
    r2 = RelationTable(table=[[10, 20, 30, 40]], table_id=2)
    return [r0, r1, r2]


def test_join_self_new_relation_adds_entry():
    relations = _relations()
    res_list = []
    res = join_self(relations, JoinPred(rel1=0, col_rel1=0, rel2=0, col_rel2=1), res_list)
    assert res.row_ids == [0, 2]
    assert len(res_list) == 1
    assert res_list[0].table_list == [res]
    assert res.table_id == 0


def test_join_self_existing_keeps_order_and_entry_count():
    relations = _relations()
    existing = ResStruct(table_id=0, row_ids=[3, 2, 0, 1])
    other = FullResList(table_list=[ResStruct(table_id=2, row_ids=[0, 1])])
    res_list = [other, FullResList(table_list=[existing])]
    res = join_self(relations, JoinPred(rel1=0, col_rel1=0, rel2=0, col_rel2=1), res_list)
    assert res is existing
    assert len(res_list) == 2
    table = relations[0].table
    assert all(table[0][row] == table[1][row] for row in res.row_ids)
    original = [3, 2, 0, 1]
    positions = [original.index(row) for row in res.row_ids]
    assert positions == sorted(positions)
    assert set(res.row_ids) == {row for row in original if table[0][row] == table[1][row]}


def test_join_self_no_matches_empties_rows():
    relations = [RelationTable(table=[[1, 2], [3, 4]])]
    res_list = []
    res = join_self(relations, JoinPred(rel1=0, col_rel1=0, rel2=0, col_rel2=1), res_list)
    assert res.row_ids == []
    assert res_list[0].table_list[0].row_ids == []


def test_join_in_same_bucket_filters_all_relations_alike():
    relations = _relations()
    rel0 = ResStruct(table_id=0, row_ids=[0, 1, 2, 3])
    rel1 = ResStruct(table_id=1, row_ids=[0, 1, 2, 3])
    rel2 = ResStruct(table_id=2, row_ids=[3, 2, 1, 0])
    full = FullResList(table_list=[rel0, rel1, rel2])
    join_in_same_bucket(relations, JoinPred(rel1=0, col_rel1=0, rel2=1, col_rel2=0), rel0, rel1, full)
    assert rel0.row_ids == [1, 2]
    assert len(rel1.row_ids) == len(rel0.row_ids) == len(rel2.row_ids)
    for r0, r1 in zip(rel0.row_ids, rel1.row_ids):
        assert relations[0].table[0][r0] == relations[1].table[0][r1]
    pairing = dict(zip([0, 1, 2, 3], [3, 2, 1, 0]))
    assert rel2.row_ids == [pairing[row] for row in rel0.row_ids]


def test_join_in_same_bucket_empty_is_unchanged():
    relations = _relations()
    rel0 = ResStruct(table_id=0, row_ids=[])
    rel1 = ResStruct(table_id=1, row_ids=[])
    full = FullResList(table_list=[rel0, rel1])
    join_in_same_bucket(relations, JoinPred(rel1=0, col_rel1=0, rel2=1, col_rel2=0), rel0, rel1, full)
    assert full.table_list[0].row_ids == []
    assert full.table_list[1].row_ids == []


def test_join_in_same_bucket_all_match_keeps_everything():
    relations = [RelationTable(table=[[4, 5, 6]]), RelationTable(table=[[6, 5, 4]])]
    rel0 = ResStruct(table_id=0, row_ids=[0, 1, 2])
    rel1 = ResStruct(table_id=1, row_ids=[2, 1, 0])
    full = FullResList(table_list=[rel0, rel1])
    join_in_same_bucket(relations, JoinPred(rel1=0, col_rel1=0, rel2=1, col_rel2=0), rel0, rel1, full)
    assert rel0.row_ids == [0, 1, 2]
    assert rel1.row_ids == [2, 1, 0]


def test_join_in_same_bucket_mismatched_lengths_raise():
    relations = _relations()
    rel0 = ResStruct(table_id=0, row_ids=[0, 1])
    rel1 = ResStruct(table_id=1, row_ids=[0])
    full = FullResList(table_list=[rel0, rel1])
    with pytest.raises(ValueError):
        join_in_same_bucket(relations, JoinPred(rel1=0, col_rel1=0, rel2=1, col_rel2=0), rel0, rel1, full)