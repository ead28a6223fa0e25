"""Prefix trie for exact-word and prefix lookups."""

from __future__ import annotations


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_end_of_word")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_end_of_word: bool = False

    def __repr__(self) -> str:
        end = " end" if self.is_end_of_word else ""
        return f"<TrieNode children={len(self.children)}{end}>"


class Trie:
    """Prefix trie over single characters.

    The root stands for the empty prefix. Inserting ``""`` marks the root
    itself as a word end, so ``search_full_word("")`` is False only until
    the empty string has been inserted.
    """

    def __init__(self):
        self.root = TrieNode()

    def insert(self, word: str) -> None:
        node = self.root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = TrieNode()
            node = child
        node.is_end_of_word = True

    def search_full_word(self, word: str) -> bool:
        """True iff ``word`` was inserted."""
        node = self._walk(word)
        return node is not None and node.is_end_of_word

    def search_prefix(self, prefix: str) -> bool:
        """True iff some inserted word starts with ``prefix``."""
        return self._walk(prefix) is not None

    def __contains__(self, word: str) -> bool:
        return self.search_full_word(word)

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node
