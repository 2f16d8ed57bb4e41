import os
import sys
import random

import pytest

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from listst.datastructures import (
    ConcurrentModification,
    EmptyCollection,
    InvalidArgument,
    OrderedListMap,
    UnsupportedOperation,
)

TINY = "S E A R C H E X A M P L E".split()


def tiny_table():
    st = OrderedListMap()
    for i, key in enumerate(TINY):
        st.put(key, i)
    return st


def test_tiny_st_scenario():
    st = tiny_table()
    pairs = [(k, st.get(k)) for k in st.keys()]
    assert pairs == [
        ("A", 8), ("C", 4), ("E", 12), ("H", 5), ("L", 11),
        ("M", 9), ("P", 10), ("R", 3), ("S", 0), ("X", 7),
    ]
    assert st.size() == 10
    assert len(st) == 10
    assert st.is_sorted()


def test_empty_table():
    st = OrderedListMap()
    assert st.is_empty()
    assert not st
    assert st.size() == 0
    assert st.rank("K") == 0
    assert st.contains("K") is False
    assert "K" not in st
    assert st.get("K") is None
    assert st.select(0) is None
    assert st.floor("K") is None
    assert st.ceiling("K") is None
    assert list(st.keys()) == []
    with pytest.raises(EmptyCollection):
        st.delete_min()
    with pytest.raises(EmptyCollection):
        st.delete_max()


def test_min_max_require_nonempty_table():
    st = OrderedListMap()
    with pytest.raises(EmptyCollection):
        st.min()
    with pytest.raises(EmptyCollection):
        st.max()
    st.put(5, "five")
    assert st.min() == 5
    assert st.max() == 5


def test_none_key_is_rejected():
    st = tiny_table()
    for op in (st.get, st.delete, st.rank, st.floor, st.ceiling):
        with pytest.raises(InvalidArgument):
            op(None)
    with pytest.raises(InvalidArgument):
        st.put(None, 1)
    with pytest.raises(InvalidArgument):
        st.insert_or_update(None, 1)
    # InvalidArgument is still a ValueError for callers that only know builtins
    with pytest.raises(ValueError):
        st.get(None)
    assert st.contains(None) is False
    assert st.size() == 10


def test_insert_or_update_rejects_none_value():
    st = tiny_table()
    with pytest.raises(InvalidArgument):
        st.insert_or_update("A", None)
    assert st.get("A") == 8


def test_insert_or_update_reports_insert_vs_replace():
    st = OrderedListMap()
    assert st.insert_or_update("b", 1) is True
    assert st.insert_or_update("a", 2) is True
    assert st.insert_or_update("b", 3) is False
    assert next(st.items()) == ("a", 2)
    assert list(st.items()) == [("a", 2), ("b", 3)]
    assert st.size() == 2


def test_put_none_value_deletes_present_key():
    st = tiny_table()
    st.put("E", None)
    assert not st.contains("E")
    assert st.size() == 9
    assert st.is_sorted()


def test_put_none_value_on_absent_key_is_noop():
    st = tiny_table()
    st.put("Q", None)
    assert st.size() == 10
    assert list(st.keys()) == sorted(set(TINY))


def test_put_is_idempotent():
    st = OrderedListMap()
    st.put("k", 1)
    st.put("k", 1)
    assert st.size() == 1
    assert list(st.items()) == [("k", 1)]


def test_put_inserts_at_front_middle_and_back():
    st = OrderedListMap()
    st.put(5, "e")
    st.put(1, "a")
    st.put(9, "i")
    st.put(3, "c")
    assert list(st.keys()) == [1, 3, 5, 9]
    assert st.min() == 1
    assert st.max() == 9


def test_delete_absent_key_is_noop():
    st = tiny_table()
    assert st.delete("B") is False
    assert st.delete("Z") is False
    assert st.size() == 10
    assert st.is_sorted()


def test_delete_head_middle_and_tail():
    st = tiny_table()
    assert st.delete("A") is True
    assert st.delete("M") is True
    assert st.delete("X") is True
    assert list(st.keys()) == ["C", "E", "H", "L", "P", "R", "S"]
    assert st.size() == 7
    assert st.is_sorted()


def test_delete_last_key_empties_table():
    st = OrderedListMap()
    st.put("only", 1)
    st.delete("only")
    assert st.is_empty()
    assert st.size() == 0
    assert st.is_sorted()


def test_delete_min_and_max():
    st = tiny_table()
    st.delete_min()
    st.delete_max()
    assert st.min() == "C"
    assert st.max() == "S"
    assert st.size() == 8


def test_rank_counts_keys_less_or_equal():
    st = tiny_table()
    assert st.rank("0") == 0
    assert st.rank("A") == 1
    assert st.rank("B") == 1
    assert st.rank("D") == 2
    assert st.rank("E") == 3
    assert st.rank("Z") == 10


def test_select():
    st = tiny_table()
    assert st.select(0) == "A"
    assert st.select(2) == "E"
    assert st.select(9) == "X"
    assert st.select(10) is None
    assert st.select(-1) is None


def test_rank_of_select_is_position_plus_one():
    st = tiny_table()
    for k in range(st.size()):
        assert st.rank(st.select(k)) == k + 1


def test_floor_and_ceiling():
    st = tiny_table()
    assert st.floor("E") == "E"
    assert st.floor("D") == "C"
    assert st.floor("Z") == "X"
    assert st.floor("0") is None
    assert st.ceiling("E") == "E"
    assert st.ceiling("D") == "E"
    assert st.ceiling("0") == "A"
    assert st.ceiling("Y") is None


def test_floor_key_ceiling_ordering_for_present_keys():
    st = tiny_table()
    for key in st.keys():
        assert st.floor(key) <= key <= st.ceiling(key)


def test_keys_iterator_is_fresh_each_call_and_not_restartable():
    st = tiny_table()
    it = st.keys()
    assert list(it) == sorted(set(TINY))
    assert list(it) == []
    assert list(st.keys()) == sorted(set(TINY))
    assert list(st) == sorted(set(TINY))


def test_keys_iterator_does_not_support_remove():
    st = tiny_table()
    it = st.keys()
    next(it)
    with pytest.raises(UnsupportedOperation):
        it.remove()
    assert st.size() == 10


def test_keys_iterator_invalidated_by_structural_change():
    st = tiny_table()
    it = st.keys()
    assert next(it) == "A"
    st.put("B", 99)
    with pytest.raises(ConcurrentModification):
        next(it)

    it = st.keys()
    next(it)
    st.delete("X")
    with pytest.raises(ConcurrentModification):
        next(it)


def test_keys_iterator_survives_value_update():
    st = tiny_table()
    it = st.keys()
    next(it)
    st.put("C", 100)
    assert next(it) == "C"


def test_random_operations_match_dict_model():
    rng = random.Random(532)
    st = OrderedListMap()
    model = {}
    for _ in range(2000):
        key = rng.randint(0, 60)
        if rng.random() < 0.6:
            value = rng.randint(0, 1000)
            st.put(key, value)
            model[key] = value
        else:
            st.delete(key)
            model.pop(key, None)

        assert st.size() == len(model)
        assert st.is_sorted()

    expected = sorted(model)
    assert list(st.keys()) == expected
    assert st.size() == len(list(st.keys()))
    for key in range(-1, 62):
        assert st.contains(key) == (key in model)
        assert st.get(key) == model.get(key)
        assert st.rank(key) == sum(1 for k in expected if k <= key)
        below = [k for k in expected if k <= key]
        above = [k for k in expected if k >= key]
        assert st.floor(key) == (below[-1] if below else None)
        assert st.ceiling(key) == (above[0] if above else None)
    for i, key in enumerate(expected):
        assert st.select(i) == key


def test_exhausted_iterator_notices_insert_past_tail():
    st = OrderedListMap()
    st.put("A", 1)
    it = st.keys()
    assert next(it) == "A"
    st.put("B", 2)
    with pytest.raises(ConcurrentModification):
        next(it)


def test_iterator_on_empty_table_notices_insert():
    st = OrderedListMap()
    it = st.keys()
    st.put("A", 1)
    with pytest.raises(ConcurrentModification):
        next(it)
