"""Minimum spanning tree cost by Kruskal's and Prim's algorithms."""

from __future__ import annotations

import heapq
from collections import defaultdict
from collections.abc import Hashable, Iterable
from operator import itemgetter

from cpalgos.dsu import DisjointSet


def kruskal_cost(n: int, edges: Iterable[tuple[int, int, int]]) -> int:
    """Total weight of a minimum spanning forest over nodes ``1..n``."""
    ordered = sorted(edges, key=itemgetter(2))
    forest = DisjointSet()
    for node in range(1, n + 1):
        forest.find(node)
    total = 0
    for a, b, weight in ordered:
        for node in (a, b):
            if node not in forest:
                raise ValueError(f"node {node} outside 1..{n}")
        if forest.find(a) != forest.find(b):
            forest.union(a, b)
            total += weight
    return total


def prim_cost(edges: Iterable[tuple[Hashable, Hashable, int]], start: Hashable = 1) -> int:
    """Total weight of a minimum spanning tree of the component holding ``start``."""
    adjacency: dict[Hashable, list[tuple[int, Hashable]]] = defaultdict(list)
    for a, b, weight in edges:
        adjacency[a].append((weight, b))
        adjacency[b].append((weight, a))

    marked: set[Hashable] = set()
    total = 0
    heap: list[tuple[int, Hashable]] = [(0, start)]
    while heap:
        weight, node = heapq.heappop(heap)
        if node in marked:
            continue
        marked.add(node)
        total += weight
        for item in adjacency[node]:
            if item[1] not in marked:
                heapq.heappush(heap, item)
    return total