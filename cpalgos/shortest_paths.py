"""Weighted shortest paths: Dijkstra, second-shortest distance, lexicographically smallest path."""

from __future__ import annotations

import heapq
from collections.abc import Iterable

Edge = tuple[int, int, int]


def _check_node(n: int, node: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} outside 1..{n}")


def _adjacency(
    n: int, edges: Iterable[Edge], *, directed: bool, positive: bool = False
) -> tuple[dict[int, list[tuple[int, int]]], dict[int, list[tuple[int, int]]]]:
    forward: dict[int, list[tuple[int, int]]] = {node: [] for node in range(1, n + 1)}
    backward: dict[int, list[tuple[int, int]]] = {node: [] for node in range(1, n + 1)}
    for u, v, w in edges:
        _check_node(n, u)
        _check_node(n, v)
        if w < 0 or (positive and w == 0):
            raise ValueError(f"edge {u}-{v} has unsupported weight {w}")
        forward[u].append((v, w))
        backward[v].append((u, w))
        if not directed:
            forward[v].append((u, w))
            backward[u].append((v, w))
    return forward, backward


def _distances(adjacency: dict[int, list[tuple[int, int]]], source: int) -> dict[int, int]:
    dist = {source: 0}
    heap = [(0, source)]
    while heap:
        d, node = heapq.heappop(heap)
        if d > dist[node]:
            continue
        for neighbour, weight in adjacency[node]:
            candidate = d + weight
            if neighbour not in dist or candidate < dist[neighbour]:
                dist[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return dist


def dijkstra(n: int, edges: Iterable[Edge], source: int = 1) -> dict[int, int | None]:
    """Shortest distances from ``source`` over undirected weighted edges on nodes ``1..n``.

    Unreachable nodes map to ``None``.
    """
    _check_node(n, source)
    adjacency, _ = _adjacency(n, edges, directed=False)
    dist = _distances(adjacency, source)
    return {node: dist.get(node) for node in range(1, n + 1)}


def second_shortest_distance(
    n: int, edges: Iterable[Edge], source: int = 1, target: int | None = None
) -> int | None:
    """Length of the shortest walk from ``source`` to ``target`` strictly longer than the shortest.

    Edges are undirected and may be reused. ``target`` defaults to ``n``; ``None`` is
    returned when no such walk exists.
    """
    target = n if target is None else target
    _check_node(n, source)
    _check_node(n, target)
    adjacency, _ = _adjacency(n, edges, directed=False)

    best: dict[int, float] = {node: float("inf") for node in adjacency}
    second: dict[int, float] = dict(best)
    best[source] = 0
    heap = [(0, source)]
    while heap:
        cost, node = heapq.heappop(heap)
        if cost > second[node]:
            continue
        for neighbour, weight in adjacency[node]:
            candidate = cost + weight
            if candidate < best[neighbour]:
                second[neighbour] = best[neighbour]
                best[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
            elif best[neighbour] < candidate < second[neighbour]:
                second[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    result = second[target]
    return None if result == float("inf") else int(result)


def lexicographic_shortest_path(
    n: int, edges: Iterable[Edge], source: int = 1, target: int | None = None
) -> list[int]:
    """Among the shortest directed paths from ``source`` to ``target``, the lexicographically smallest.

    Edge weights must be positive. ``target`` defaults to ``n``.
    """
    target = n if target is None else target
    _check_node(n, source)
    _check_node(n, target)
    forward, backward = _adjacency(n, edges, directed=True, positive=True)

    from_source = _distances(forward, source)
    if target not in from_source:
        raise ValueError(f"{target} is not reachable from {source}")
    to_target = _distances(backward, target)
    total = from_source[target]

    path = [source]
    node = source
    while node != target:
        node = min(
            neighbour
            for neighbour, weight in forward[node]
            if neighbour in to_target
            and from_source[node] + weight + to_target[neighbour] == total
        )
        path.append(node)
    return path