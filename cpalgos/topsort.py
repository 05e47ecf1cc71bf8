"""Topological ordering of a directed acyclic graph on nodes ``0..n-1``."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


def _adjacency(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        for node in (u, v):
            if not 0 <= node < n:
                raise ValueError(f"node {node} outside 0..{n - 1}")
        adjacency[u].append(v)
    return adjacency


def topological_sort_kahn(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Order nodes by repeatedly taking those with no remaining incoming edges, first in first out."""
    adjacency = _adjacency(n, edges)
    indegree = [0] * n
    for targets in adjacency:
        for v in targets:
            indegree[v] += 1

    queue = deque(node for node, degree in enumerate(indegree) if degree == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for v in adjacency[node]:
            indegree[v] -= 1
            if indegree[v] == 0:
                queue.append(v)
    if len(order) < n:
        raise ValueError("graph has a cycle")
    return order


def topological_sort_dfs(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Order nodes by reversed depth-first finishing order."""
    adjacency = _adjacency(n, edges)
    visited: set[int] = set()
    active: set[int] = set()
    finished: list[int] = []
    for root in range(n):
        if root in visited:
            continue
        visited.add(root)
        active.add(root)
        stack = [(root, iter(adjacency[root]))]
        while stack:
            node, neighbours = stack[-1]
            for v in neighbours:
                if v in active:
                    raise ValueError("graph has a cycle")
                if v not in visited:
                    visited.add(v)
                    active.add(v)
                    stack.append((v, iter(adjacency[v])))
                    break
            else:
                stack.pop()
                active.discard(node)
                finished.append(node)
    finished.reverse()
    return finished