from hypothesis import given
from hypothesis import strategies as st

from cpalgos.dsu import DisjointSet, network_sizes


def test_friendship_networks_growing_chain():
    pairs = [("Fred", "Barney"), ("Barney", "Betty"), ("Betty", "Wilma")]
    assert network_sizes(pairs) == [2, 3, 4]


def test_friendship_networks_merge_late():
    pairs = [("Fred", "Barney"), ("Betty", "Wilma"), ("Barney", "Betty")]
    assert network_sizes(pairs) == [2, 2, 4]


def test_new_item_is_singleton():
    dsu = DisjointSet()
    assert dsu.find("x") == "x"
    assert dsu.size_of("x") == 1
    assert "x" in dsu
    assert len(dsu) == 1


def test_repeated_union_keeps_size():
    dsu = DisjointSet()
    first = dsu.union(1, 2)
    assert dsu.union(2, 1) == first
    assert dsu.union(1, 1) == first


@given(st.lists(st.tuples(st.integers(0, 20), st.integers(0, 20)), max_size=40))
def test_union_invariants(pairs):
    dsu = DisjointSet()
    for a, b in pairs:
        size = dsu.union(a, b)
        assert dsu.find(a) == dsu.find(b)
        assert size == dsu.size_of(a) == dsu.size_of(b)
    items = {x for pair in pairs for x in pair}
    roots = {dsu.find(x) for x in items}
    assert sum(dsu.size_of(r) for r in roots) == len(dsu) == len(items)


@given(st.lists(st.tuples(st.integers(0, 10), st.integers(0, 10)), min_size=1, max_size=30))
def test_sizes_never_shrink_for_an_item(pairs):
    dsu = DisjointSet()
    sizes = {}
    for a, b in pairs:
        dsu.union(a, b)
        for x in (a, b):
            current = dsu.size_of(x)
            assert current >= sizes.get(x, 1)
            sizes[x] = current
    assert len(sizes) >= 1