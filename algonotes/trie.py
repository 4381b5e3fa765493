"""A character trie for membership of whole words."""

from __future__ import annotations

from typing import Iterable


class _TrieNode:
    __slots__ = ("links", "member")

    def __init__(self) -> None:
        self.links: dict[str, _TrieNode] = {}
        self.member = False


class Trie:
    """A set of strings stored as a tree of characters."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _TrieNode()
        for word in words:
            self.add(word)

    def add(self, word: str) -> None:
        """Add *word* to the trie."""
        node = self._root
        for char in word:
            node = node.links.setdefault(char, _TrieNode())
        node.member = True

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        node = self._root
        for char in word:
            node = node.links.get(char)
            if node is None:
                return False
        return node.member