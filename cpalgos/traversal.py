"""Breadth-first and depth-first traversal, shortest unweighted paths, two-colouring."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from itertools import count

Graph = Mapping[Hashable, Sequence[Hashable]]


@dataclass(frozen=True)
class BfsResult:
    """Levels and BFS-tree parents of every node reached from ``source``."""

    source: Hashable
    levels: dict[Hashable, int]
    parents: dict[Hashable, Hashable]


@dataclass(frozen=True)
class DfsResult:
    """Discovery times, finish times and tree depths from a depth-first search."""

    discovery: dict[Hashable, int]
    finish: dict[Hashable, int]
    levels: dict[Hashable, int]


def undirected_graph(edges: Iterable[tuple[Hashable, Hashable]]) -> dict[Hashable, list[Hashable]]:
    """Build an adjacency mapping in which every edge is stored in both directions."""
    graph: dict[Hashable, list[Hashable]] = {}
    for u, v in edges:
        graph.setdefault(u, []).append(v)
        graph.setdefault(v, []).append(u)
    return graph


def bfs(graph: Graph, source: Hashable) -> BfsResult:
    """Run a breadth-first search from ``source``."""
    levels: dict[Hashable, int] = {source: 0}
    parents: dict[Hashable, Hashable] = {}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for neighbour in graph.get(node, ()):
            if neighbour not in levels:
                levels[neighbour] = levels[node] + 1
                parents[neighbour] = node
                queue.append(neighbour)
    return BfsResult(source, levels, parents)


def bfs_path(graph: Graph, source: Hashable, target: Hashable) -> list[Hashable]:
    """Return a path with the fewest edges from ``source`` to ``target``, both included."""
    result = bfs(graph, source)
    if target not in result.levels:
        raise ValueError(f"{target!r} is not reachable from {source!r}")
    path = [target]
    while path[-1] != source:
        path.append(result.parents[path[-1]])
    path.reverse()
    return path


def dfs(graph: Graph, nodes: Iterable[Hashable]) -> DfsResult:
    """Depth-first search started from each of ``nodes`` not yet visited, in order.

    One clock ticks on every discovery and every finish, starting at 1.
    """
    discovery: dict[Hashable, int] = {}
    finish: dict[Hashable, int] = {}
    levels: dict[Hashable, int] = {}
    clock = count(1)
    for root in nodes:
        if root in discovery:
            continue
        levels[root] = 0
        discovery[root] = next(clock)
        stack = [(root, iter(graph.get(root, ())))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if neighbour not in discovery:
                    levels[neighbour] = levels[node] + 1
                    discovery[neighbour] = next(clock)
                    stack.append((neighbour, iter(graph.get(neighbour, ()))))
                    break
            else:
                stack.pop()
                finish[node] = next(clock)
    return DfsResult(discovery, finish, levels)


def is_bipartite(graph: Graph, start: Hashable) -> bool:
    """Tell whether the component holding ``start`` can be two-coloured."""
    colour = {start: 1}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for neighbour in graph.get(node, ()):
            if neighbour in colour:
                if colour[neighbour] == colour[node]:
                    return False
            else:
                colour[neighbour] = 1 - colour[node]
                queue.append(neighbour)
    return True