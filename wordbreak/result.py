"""Outcome of segmenting one input."""

from __future__ import annotations

from wordbreak.errors import UnmatchedRun


class Segmentation:
    """Either the words of an input, or the reason it could not be split.

    On failure ``words`` and ``spans`` are empty; whatever was committed
    before the failing position is kept in ``partial`` for diagnostics.
    """

    __slots__ = ("text", "words", "spans", "error", "partial")

    def __init__(
        self,
        text: str,
        words: tuple[str, ...] = (),
        spans: tuple[tuple[int, int], ...] = (),
        error: UnmatchedRun | None = None,
        partial: tuple[str, ...] = (),
    ):
        self.text = text
        self.words = words
        self.spans = spans      # [(start, end), ...] into text, one per word
        self.error = error
        self.partial = partial

    @classmethod
    def success(cls, text: str, spans: list[tuple[int, int]]) -> Segmentation:
        return cls(text, tuple(text[s:e] for s, e in spans), tuple(spans))

    @classmethod
    def failure(cls, text: str, error: UnmatchedRun, spans: list[tuple[int, int]]) -> Segmentation:
        return cls(text, error=error, partial=tuple(text[s:e] for s, e in spans))

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> list[str]:
        if self.error is not None:
            raise self.error
        return list(self.words)

    def __bool__(self) -> bool:
        return self.ok

    def __repr__(self) -> str:
        if self.error is not None:
            return f"<Segmentation failed at {self.error.position}: {self.error}>"
        return f"<Segmentation {' '.join(self.words)!r}>"
