"""Articulation points (cut vertices) of an undirected graph."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import count


def articulation_points(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return, in increasing order, the nodes of ``1..n`` whose removal disconnects their component."""
    adjacency: dict[int, list[int]] = {node: [] for node in range(1, n + 1)}
    for u, v in edges:
        for node in (u, v):
            if node not in adjacency:
                raise ValueError(f"node {node} outside 1..{n}")
        adjacency[u].append(v)
        adjacency[v].append(u)

    discovery: dict[int, int] = {}
    low: dict[int, int] = {}
    points: set[int] = set()
    clock = count(1)

    for root in range(1, n + 1):
        if root in discovery:
            continue
        discovery[root] = low[root] = next(clock)
        children = 0
        stack = [(root, iter(adjacency[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if neighbour in discovery:
                    low[node] = min(low[node], discovery[neighbour])
                else:
                    discovery[neighbour] = low[neighbour] = next(clock)
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
            else:
                stack.pop()
                if stack:
                    parent = stack[-1][0]
                    if parent == root:
                        children += 1
                    elif discovery[parent] <= low[node]:
                        points.add(parent)
                    low[parent] = min(low[parent], low[node])
        if children > 1:
            points.add(root)
    return sorted(points)