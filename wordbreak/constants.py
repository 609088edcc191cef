"""Shared constants for the word breaker."""

from __future__ import annotations

import os
import string

# Characters a round may start on before the non-alphabetic policy applies.
ALPHABET = frozenset(string.ascii_lowercase)

SYSTEM_DICT = "/usr/share/dict/words"

DEFAULT_DICT_PATHS: list[str] = [
    "dictionary.txt",
    "words.txt",
    "wordsEn.txt",
    "merriam-webster.dict",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "dictionary.txt"),
    SYSTEM_DICT,
]

# Characters of remaining input quoted in failure messages.
EXCERPT_LEN = 12

# fmt: off
MINIMAL_WORDS: frozenset[str] = frozenset({
    "a", "about", "after", "all", "also", "an", "and", "any", "are", "as",
    "at", "back", "be", "because", "but", "by", "can", "come", "could", "day",
    "do", "even", "first", "for", "from", "get", "give", "go", "good", "have",
    "he", "her", "him", "his", "how", "i", "if", "in", "into", "is",
    "it", "its", "just", "know", "like", "look", "make", "me", "most", "my",
    "new", "no", "not", "now", "of", "on", "one", "only", "or", "other",
    "our", "out", "over", "people", "say", "see", "she", "so", "some", "take",
    "than", "that", "the", "their", "them", "then", "there", "these", "they", "think",
    "this", "time", "to", "two", "up", "us", "use", "want", "way", "we",
    "well", "what", "when", "which", "who", "will", "with", "work", "would", "year",
    "you", "your", "word", "words", "break", "sentence", "apple", "pie", "cat", "dog",
})
# fmt: on
