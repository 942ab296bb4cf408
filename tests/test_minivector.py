import pytest

from relquery.minivector import MiniVector


def test_push_back_keeps_order_and_grows():
    vec = MiniVector(1)
    for item in (5, 6, 7):
        vec.push_back(item)
    assert list(vec) == [5, 6, 7]
    assert len(vec) == 3
    assert vec.capacity() >= len(vec)
    assert vec.capacity() == 4


def test_zero_capacity_grows_to_one():
    vec = MiniVector(0)
    vec.push_back("x")
    assert vec.capacity() == 1
    assert vec[0] == "x"


def test_capacity_unchanged_while_room_left():
    vec = MiniVector(10)
    vec.push_back(1)
    assert vec.capacity() == 10


def test_setitem_and_getitem():
    vec = MiniVector()
    vec.push_back(1)
    vec[0] = 9
    assert vec[0] == 9
    with pytest.raises(IndexError):
        vec[3]


def test_remove_shifts_items():
    vec = MiniVector()
    for item in range(4):
        vec.push_back(item)
    vec.remove(1)
    assert list(vec) == [0, 2, 3]
    with pytest.raises(IndexError):
        vec.remove(3)


def test_remove_many():
    vec = MiniVector()
    for item in range(6):
        vec.push_back(item)
    vec.remove_many([1, 3])
    assert list(vec) == [0, 2, 4, 5]


def test_remove_many_single_and_empty():
    vec = MiniVector()
    for item in "abc":
        vec.push_back(item)
    vec.remove_many([])
    assert list(vec) == ["a", "b", "c"]
    vec.remove_many([2])
    assert list(vec) == ["a", "b"]
    with pytest.raises(IndexError):
        vec.remove_many([0, 5])
    assert list(vec) == ["a", "b"]


def test_reverse_sets_capacity_to_length():
    vec = MiniVector(8)
    for item in (1, 2, 3):
        vec.push_back(item)
    vec.reverse()
    assert list(vec) == [3, 2, 1]
    assert vec.capacity() == len(vec)


def test_reserve_with_copy_keeps_items():
    vec = MiniVector()
    vec.push_back("a")
    vec.push_back("b")
    vec.reserve(16, True)
    assert list(vec) == ["a", "b"]
    assert vec.capacity() == 16


def test_reserve_without_copy_drops_items():
    vec = MiniVector()
    vec.push_back("a")
    vec.reserve(5, False)
    assert len(vec) == 0
    assert vec.capacity() == 5


def test_reserve_too_small_with_copy():
    vec = MiniVector()
    for item in range(3):
        vec.push_back(item)
    with pytest.raises(ValueError):
        vec.reserve(2, True)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        MiniVector(-1)