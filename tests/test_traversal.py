import pytest
from hypothesis import given
from hypothesis import strategies as st

from cpalgos.traversal import bfs, bfs_path, dfs, is_bipartite, undirected_graph

EDGES = [(1, 2), (1, 3), (2, 4), (3, 4), (4, 5), (6, 7)]


@st.composite
def random_edges(draw):
    n = draw(st.integers(min_value=1, max_value=12))
    node = st.integers(min_value=1, max_value=n)
    edges = draw(st.lists(st.tuples(node, node), max_size=30))
    return n, edges


@st.composite
def trees(draw):
    n = draw(st.integers(min_value=2, max_value=15))
    return [(draw(st.integers(min_value=1, max_value=i - 1)), i) for i in range(2, n + 1)]


def test_undirected_graph_is_symmetric():
    graph = undirected_graph(EDGES)
    for u, neighbours in graph.items():
        for v in neighbours:
            assert u in graph[v]
    assert sum(len(ns) for ns in graph.values()) == 2 * len(EDGES)


@given(random_edges())
def test_bfs_levels_are_consistent(data):
    n, edges = data
    graph = undirected_graph(edges)
    result = bfs(graph, 1)
    assert result.levels[1] == 0
    for child, parent in result.parents.items():
        assert result.levels[child] == result.levels[parent] + 1
        assert child in graph[parent]
    for u, v in edges:
        if u in result.levels:
            assert v in result.levels
            assert abs(result.levels[u] - result.levels[v]) <= 1


@given(random_edges())
def test_bfs_path_is_a_shortest_walk(data):
    n, edges = data
    graph = undirected_graph(edges)
    levels = bfs(graph, 1).levels
    for target, level in levels.items():
        path = bfs_path(graph, 1, target)
        assert path[0] == 1 and path[-1] == target
        assert len(path) - 1 == level
        for a, b in zip(path, path[1:]):
            assert b in graph[a]


def test_bfs_path_to_source_is_single_node():
    assert bfs_path(undirected_graph(EDGES), 3, 3) == [3]


def test_bfs_path_unreachable_raises():
    with pytest.raises(ValueError):
        bfs_path(undirected_graph(EDGES), 1, 7)


@given(random_edges())
def test_dfs_times_nest_like_parentheses(data):
    n, edges = data
    graph = undirected_graph(edges)
    result = dfs(graph, range(1, n + 1))
    assert set(result.discovery) == set(range(1, n + 1))
    times = list(result.discovery.values()) + list(result.finish.values())
    assert sorted(times) == list(range(1, 2 * n + 1))
    for u in result.discovery:
        assert result.discovery[u] < result.finish[u]
        for v in result.discovery:
            a, b = (result.discovery[u], result.finish[u]), (result.discovery[v], result.finish[v])
            disjoint = a[1] < b[0] or b[1] < a[0]
            nested = (a[0] <= b[0] and b[1] <= a[1]) or (b[0] <= a[0] and a[1] <= b[1])
            assert disjoint or nested


def test_dfs_roots_have_level_zero():
    result = dfs(undirected_graph(EDGES), [1, 6])
    assert result.levels[1] == 0
    assert result.levels[6] == 0
    assert result.levels[7] == 1


def test_even_cycle_is_bipartite():
    assert is_bipartite(undirected_graph([(1, 2), (2, 3), (3, 4), (4, 1)]), 1) is True


def test_odd_cycle_is_not_bipartite():
    assert is_bipartite(undirected_graph([(1, 2), (2, 3), (3, 1)]), 1) is False


@given(trees())
def test_trees_are_bipartite(edges):
    assert is_bipartite(undirected_graph(edges), 1) is True