"""Dictionary / word list with trie-backed prefix search."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Sequence

from wordbreak.constants import DEFAULT_DICT_PATHS, MINIMAL_WORDS
from wordbreak.trie import Trie, TrieCursor

log = logging.getLogger("wordbreak")


class Dictionary:
    """Case-insensitive word list answering word and prefix queries.

    Built once, then only read.  Sharing one instance between any number of
    segmenters (or threads) is safe as long as nobody calls ``update`` on it.
    """

    def __init__(self, words: Iterable[str] | None = None):
        self.trie = Trie()
        self.source: str | None = None
        if words is not None:
            self.update(words)

    @classmethod
    def load(cls, dict_path: str | None = None) -> Dictionary:
        """First usable word file from *dict_path* and the default locations."""
        search_paths: list[str] = []
        if dict_path:
            search_paths.append(dict_path)
        search_paths.extend(DEFAULT_DICT_PATHS)

        for path in search_paths:
            if os.path.exists(path):
                dictionary = cls()
                try:
                    dictionary.read(path)
                except UnicodeDecodeError:
                    log.warning("%s is not UTF-8 -- reading it as Latin-1.", path)
                    dictionary = cls()
                    dictionary.read(path, encoding="latin-1")
                if len(dictionary):
                    dictionary.source = path
                    log.info("Loaded %s words from %s", f"{len(dictionary):,}", path)
                    return dictionary
                log.debug("Skipping empty word list %s", path)

        log.warning("No dictionary file found -- using built-in minimal word list.")
        log.warning("Run bootstrap.py or pass --dict to use a full word list.")
        dictionary = cls()
        dictionary.update(MINIMAL_WORDS)
        dictionary.source = "<minimal>"
        return dictionary

    def read(self, path: str, encoding: str = "utf-8") -> None:
        """Insert the whitespace-separated tokens of the file at *path*."""
        with open(path, "r", encoding=encoding) as f:
            for line in f:
                self.update(line.split())

    def update(self, words: Iterable[str]) -> None:
        for word in words:
            if word.strip():
                self.trie.insert(word)

    def insert(self, word: str) -> None:
        self.trie.insert(word)

    def query(self, seq: Sequence[str], start: int = 0, end: int | None = None) -> tuple[bool, bool]:
        return self.trie.query(seq, start, end)

    def cursor(self) -> TrieCursor:
        return self.trie.cursor()

    def is_valid(self, word: str) -> bool:
        return self.trie.is_word(word)

    def is_prefix(self, prefix: str) -> bool:
        return self.trie.is_prefix(prefix)

    def __contains__(self, word: str) -> bool:
        return self.is_valid(word)

    def __len__(self) -> int:
        return len(self.trie)
