"""Word list loaded from a text file into a prefix trie."""

from __future__ import annotations

import logging
import os

from prefixtrie.trie import Trie

log = logging.getLogger("prefixtrie")

DEFAULT_SEARCH_PATHS: list[str] = [
    "words.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "words.txt"),
    "/usr/share/dict/words",
]

SAMPLE_WORDS: frozenset[str] = frozenset({
    "hello", "help", "helper", "helm", "hero", "world", "word", "work",
    "worker", "wore", "apple", "apply", "app", "tree", "trie", "try",
})


class WordList:
    """Set of words with a trie for exact and prefix checks."""

    def __init__(self, path: str | None = None):
        self.words: set[str] = set()
        self.trie = Trie()
        self._load(path)

    def _load(self, path: str | None) -> None:
        search_paths: list[str] = []
        if path:
            search_paths.append(path)

        search_paths.extend(DEFAULT_SEARCH_PATHS)

        for candidate in search_paths:
            if not os.path.isfile(candidate):
                log.debug("No word list at %s", candidate)
                continue
            with open(candidate, "r", encoding="utf-8") as f:
                for line in f:
                    word = line.strip()
                    if word and not word.startswith("#"):
                        self.add(word)
            if self.words:
                log.info("Loaded %s words from %s", f"{len(self.words):,}", candidate)
                return
            log.debug("Word list %s is empty, trying next", candidate)

        log.warning("No word list found -- using built-in sample words.")
        self._load_sample()

    def _load_sample(self) -> None:
        for w in SAMPLE_WORDS:
            self.add(w)

    def add(self, word: str) -> None:
        self.words.add(word)
        self.trie.insert(word)

    def is_valid(self, word: str) -> bool:
        return self.trie.search_full_word(word)

    def has_prefix(self, prefix: str) -> bool:
        return self.trie.search_prefix(prefix)

    def __contains__(self, word: str) -> bool:
        return self.is_valid(word)

    def __len__(self) -> int:
        return len(self.words)
