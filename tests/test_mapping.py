import pytest

from ticketdesk.mapping import Map, MapPair, MultiMap, Set


def _lt(a, b):
    return a < b


def _traverse(m):
    out = []
    pair = m.first()
    while pair is not None:
        out.append((pair.key, pair.value))
        pair = m.next()
    return out


def test_unsorted_map_keeps_insertion_order():
    m = Map()
    for key in ["b", "a", "c"]:
        m.insert(key, key.upper())
    assert _traverse(m) == [("b", "B"), ("a", "A"), ("c", "C")]


def test_map_insert_ignores_duplicate_key():
    m = Map()
    m.insert("k", 1)
    m.insert("k", 2)
    assert len(m) == 1
    assert m.search("k") == MapPair("k", 1)


def test_sorted_map_orders_keys():
    m = Map(lower_than=_lt)
    keys = [5, 2, 9, 1, 7]
    for key in keys:
        m.insert(key, str(key))
    assert [k for k, _ in _traverse(m)] == sorted(keys)
    assert m.is_sorted


def test_sorted_map_equality_from_lower_than():
    m = Map(lower_than=lambda a, b: a.lower() < b.lower())
    m.insert("Key", 1)
    m.insert("KEY", 2)
    assert len(m) == 1
    assert m.search("key").value == 1


def test_custom_is_equal():
    m = Map(lambda a, b: a % 10 == b % 10)
    m.insert(13, "x")
    assert m.search(23).key == 13
    assert 33 in m
    assert 4 not in m


def test_search_missing_is_none():
    assert Map().search("nope") is None


def test_remove_returns_pair_and_deletes():
    m = Map()
    m.insert("a", 1)
    m.insert("b", 2)
    removed = m.remove("a")
    assert removed == MapPair("a", 1)
    assert m.search("a") is None
    assert _traverse(m) == [("b", 2)]
    assert m.remove("a") is None


def test_clean_empties_map():
    m = Map()
    m.insert("a", 1)
    m.clean()
    assert len(m) == 0
    assert m.first() is None


def test_multimap_keeps_duplicates_in_order():
    mm = MultiMap(lower_than=_lt)
    mm.insert(1, "a")
    mm.insert(0, "z")
    mm.insert(1, "b")
    assert _traverse(mm) == [(0, "z"), (1, "a"), (1, "b")]
    assert mm.search(1).value == "a"
    assert mm.remove(1).value == "a"
    assert mm.search(1).value == "b"


def test_unsorted_multimap_appends():
    mm = MultiMap()
    mm.insert("k", 1)
    mm.insert("k", 2)
    assert [p.value for p in mm] == [1, 2]


@pytest.mark.parametrize("make", [lambda: Set(), lambda: Set(lower_than=_lt)])
def test_set_roundtrip(make):
    s = make()
    for value in [3, 1, 3, 2, 1]:
        s.insert(value)
    assert sorted(s) == [1, 2, 3]
    assert s.search(2) == 2
    assert s.remove(2) == 2
    assert s.search(2) is None
    assert s.remove(2) is None
    s.clean()
    assert len(s) == 0


def test_sorted_set_iterates_in_order():
    s = Set(lower_than=_lt)
    values = [4, 8, 1, 6]
    for value in values:
        s.insert(value)
    assert list(s) == sorted(values)
    assert 8 in s