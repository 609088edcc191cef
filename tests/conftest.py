from __future__ import annotations

import pytest

from wordbreak.dictionary import Dictionary
from wordbreak.segmenter import Segmenter


@pytest.fixture
def english() -> Dictionary:
    return Dictionary([
        "the", "there", "then", "cat", "cats", "at", "sat", "on", "mat",
        "a", "an", "and", "apple", "pie", "hello", "world", "in", "is",
    ])


@pytest.fixture
def segmenter(english: Dictionary) -> Segmenter:
    return Segmenter(english)
