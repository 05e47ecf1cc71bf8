"""Disjoint-set union with set sizes, keyed by arbitrary hashable items."""

from __future__ import annotations

from collections.abc import Hashable, Iterable


class DisjointSet:
    """Union-find over hashable items; unknown items become singleton sets on first use."""

    def __init__(self) -> None:
        self._parent: dict[Hashable, Hashable] = {}
        self._size: dict[Hashable, int] = {}

    def __len__(self) -> int:
        return len(self._parent)

    def __contains__(self, item: object) -> bool:
        return item in self._parent

    def find(self, item: Hashable) -> Hashable:
        """Return the representative of the set holding ``item``."""
        if item not in self._parent:
            self._parent[item] = item
            self._size[item] = 1
            return item
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, a: Hashable, b: Hashable) -> int:
        """Merge the sets of ``a`` and ``b`` and return the size of the resulting set."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a != root_b:
            self._size[root_a] += self._size.pop(root_b)
            self._parent[root_b] = root_a
        return self._size[root_a]

    def size_of(self, item: Hashable) -> int:
        """Return the size of the set holding ``item``."""
        return self._size[self.find(item)]


def network_sizes(friendships: Iterable[tuple[Hashable, Hashable]]) -> list[int]:
    """Return the size of the joined network after each friendship is formed."""
    networks = DisjointSet()
    return [networks.union(a, b) for a, b in friendships]