"""Prefix tree with per-node pass counts and breadth-first levels."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    count: int = 0
    terminal: bool = False


class Trie:
    """A prefix tree of strings."""

    def __init__(self) -> None:
        self._root = _Node()
        self._words = 0

    def add(self, word: str) -> None:
        """Insert ``word``; duplicates are counted again."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _Node())
            node.count += 1
        node.terminal = True
        self._words += 1

    def _walk(self, text: str) -> _Node | None:
        node = self._root
        for ch in text:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def contains_prefix(self, word: str) -> bool:
        """Tell whether ``word`` is a prefix of some inserted word."""
        return self._walk(word) is not None

    def is_word(self, word: str) -> bool:
        """Tell whether ``word`` was inserted."""
        node = self._walk(word)
        return node is not None and node.terminal

    def prefix_count(self, prefix: str) -> int:
        """Return how many inserted words start with ``prefix``."""
        if not prefix:
            return self._words
        node = self._walk(prefix)
        return 0 if node is None else node.count

    def levels(self) -> dict[str, int]:
        """Map every stored prefix to its depth, in breadth-first order."""
        result: dict[str, int] = {}
        queue: deque[tuple[str, _Node, int]] = deque([("", self._root, 0)])
        while queue:
            prefix, node, depth = queue.popleft()
            result[prefix] = depth
            for ch in sorted(node.children):
                queue.append((prefix + ch, node.children[ch], depth + 1))
        return result