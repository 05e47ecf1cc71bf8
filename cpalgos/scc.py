"""Strongly connected components of a directed graph by Kosaraju's algorithm."""

from __future__ import annotations

from collections.abc import Iterable


def strongly_connected_components(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Return the components of the directed graph on nodes ``1..n``.

    Components come in topological order of the condensation, sources first.
    """
    forward: dict[int, list[int]] = {node: [] for node in range(1, n + 1)}
    backward: dict[int, list[int]] = {node: [] for node in range(1, n + 1)}
    for u, v in edges:
        for node in (u, v):
            if node not in forward:
                raise ValueError(f"node {node} outside 1..{n}")
        forward[u].append(v)
        backward[v].append(u)

    finished: list[int] = []
    seen: set[int] = set()
    for root in range(1, n + 1):
        if root in seen:
            continue
        seen.add(root)
        stack = [(root, iter(forward[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if neighbour not in seen:
                    seen.add(neighbour)
                    stack.append((neighbour, iter(forward[neighbour])))
                    break
            else:
                stack.pop()
                finished.append(node)

    assigned: set[int] = set()
    components: list[list[int]] = []
    for root in reversed(finished):
        if root in assigned:
            continue
        assigned.add(root)
        component = [root]
        stack = [iter(backward[root])]
        while stack:
            for neighbour in stack[-1]:
                if neighbour not in assigned:
                    assigned.add(neighbour)
                    component.append(neighbour)
                    stack.append(iter(backward[neighbour]))
                    break
            else:
                stack.pop()
        components.append(component)
    return components