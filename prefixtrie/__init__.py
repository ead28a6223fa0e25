"""prefixtrie -- prefix tree for word and prefix lookups."""

from prefixtrie.trie import Trie, TrieNode
from prefixtrie.wordlist import WordList

__all__ = [
    "Trie",
    "TrieNode",
    "WordList",
]
