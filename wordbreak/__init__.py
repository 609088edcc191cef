"""Word breaker -- splits boundary-free text into dictionary words."""

from wordbreak.trie import Trie, TrieCursor, TrieNode
from wordbreak.dictionary import Dictionary
from wordbreak.errors import NonAlphabeticRun, SegmentationError, UnmatchedRun
from wordbreak.result import Segmentation
from wordbreak.segmenter import Segmenter

__all__ = [
    "Dictionary",
    "NonAlphabeticRun",
    "Segmentation",
    "SegmentationError",
    "Segmenter",
    "Trie",
    "TrieCursor",
    "TrieNode",
    "UnmatchedRun",
]
