"""Segmentation failures."""

from __future__ import annotations

from wordbreak.constants import EXCERPT_LEN


class SegmentationError(Exception):
    """Base class for inputs that cannot be broken into words."""


class UnmatchedRun(SegmentationError):
    """No word and no viable prefix starts at ``position``."""

    def __init__(self, position: int, text: str):
        self.position = position
        self.text = text
        super().__init__(self._message())

    @property
    def excerpt(self) -> str:
        rest = self.text[self.position:]
        if len(rest) > EXCERPT_LEN:
            return rest[:EXCERPT_LEN] + "..."
        return rest

    def _message(self) -> str:
        return f"no dictionary word starts at position {self.position} ({self.excerpt!r})"


class NonAlphabeticRun(UnmatchedRun):
    """A run of characters outside the alphabet could not be matched."""

    def __init__(self, position: int, text: str, run: str):
        self.run = run
        super().__init__(position, text)

    def _message(self) -> str:
        return f"non-alphabetic run {self.run!r} at position {self.position}"
