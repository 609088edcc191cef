"""Prefix trie answering word and prefix queries over character ranges."""

from __future__ import annotations

from collections.abc import Sequence


def normalize(ch: str) -> str:
    """Key used for *ch* in the trie, on insertion and on lookup alike."""
    return ch.lower()


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_terminal")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_terminal: bool = False


class TrieCursor:
    """Position inside a trie, advanced one character at a time.

    A cursor lets a caller probe ``s[i:j]``, ``s[i:j+1]``, ... with one child
    lookup per step instead of walking from the root each time.  Once a step
    falls off the tree the cursor is dead and stays dead.
    """

    __slots__ = ("node", "depth")

    def __init__(self, root: TrieNode):
        self.node: TrieNode | None = root
        self.depth = 0

    def advance(self, ch: str) -> bool:
        if self.node is not None:
            self.node = self.node.children.get(normalize(ch))
        self.depth += 1
        return self.node is not None

    @property
    def is_dead(self) -> bool:
        return self.node is None

    @property
    def is_word(self) -> bool:
        return self.node is not None and self.node.is_terminal

    @property
    def is_extendable(self) -> bool:
        return self.node is not None and bool(self.node.children)

    def state(self) -> tuple[bool, bool]:
        return self.is_word, self.is_extendable


class Trie:
    """Case-insensitive prefix trie."""

    def __init__(self):
        self.root = TrieNode()
        self.size = 0

    def insert(self, word: str) -> None:
        node = self.root
        for ch in word:
            key = normalize(ch)
            if key not in node.children:
                node.children[key] = TrieNode()
            node = node.children[key]
        if not node.is_terminal:
            node.is_terminal = True
            self.size += 1

    def query(self, seq: Sequence[str], start: int = 0, end: int | None = None) -> tuple[bool, bool]:
        """Return ``(is_word, is_extendable)`` for ``seq[start:end]``.

        ``is_extendable`` means some strictly longer word starts with the range.
        Both are False when the range is not a path in the tree at all.
        """
        if end is None:
            end = len(seq)
        cursor = self.cursor()
        for i in range(start, end):
            if not cursor.advance(seq[i]):
                return False, False
        return cursor.state()

    def cursor(self) -> TrieCursor:
        return TrieCursor(self.root)

    def is_word(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_terminal

    def is_prefix(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(normalize(ch))
            if node is None:
                return None
        return node

    def __len__(self) -> int:
        return self.size
