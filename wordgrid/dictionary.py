from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from wordgrid.errors import DictionaryLoadError

logger = logging.getLogger("wordgrid")


class TrieNode:
    __slots__ = ("children", "is_word")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_word: bool = False

    def child(self, ch: str) -> TrieNode | None:
        return self.children.get(ch)


class Trie:
    """Word set answering exact and prefix membership. Matching is case-exact."""

    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    @classmethod
    def from_words(cls, words: Iterable[str]) -> Trie:
        trie = cls()
        for word in words:
            trie.insert(word)
        return trie

    def insert(self, word: str):
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        if not node.is_word:
            node.is_word = True
            self._size += 1

    def find(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def contains_prefix(self, s: str) -> bool:
        if not s:
            return self._size > 0
        return self.find(s) is not None

    def is_word(self, s: str) -> bool:
        node = self.find(s)
        return node is not None and node.is_word

    def __contains__(self, s) -> bool:
        return isinstance(s, str) and self.is_word(s)

    def __len__(self) -> int:
        return self._size


def load_dictionary(path: str | Path) -> Trie:
    """Build a trie from a word list, one entry per line, taken verbatim."""
    trie = Trie()
    try:
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                word = line.rstrip("\r\n")
                if word:
                    trie.insert(word)
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryLoadError(f"could not read dictionary {path}: {e}") from e

    logger.info("Loaded %d words from %s", len(trie), path)
    return trie
