"""Greedy longest-match word breaking with single-step backtracking.

Each round looks for the longest dictionary word starting at ``start``:

  * the probe grows one character at a time through a trie cursor;
  * a word no longer dictionary word starts with (or one that reaches the end of the
    input) is committed on the spot;
  * a word that could still grow is remembered as the fallback and the
    probe keeps going;
  * when the probe falls off the trie the fallback is committed, or, if
    the round never saw a word, the round fails.

Committed words are never revisited, so some inputs that a shorter earlier
word would have let split are rejected ("abcd" with {ab, abc, cd} takes "abc" and then fails).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from wordbreak.constants import ALPHABET
from wordbreak.dictionary import Dictionary
from wordbreak.errors import NonAlphabeticRun, UnmatchedRun
from wordbreak.result import Segmentation
from wordbreak.trie import normalize

logger = logging.getLogger("wordbreak.segmenter")

# Between committed words: nothing, or exactly one separator character.
SEPARATOR_POLICIES = ("none", "skip")
# An alphabetic character no round can match: fail, emit it alone, or drop it.
UNMATCHED_POLICIES = ("fail", "single", "skip")
# A run of non-alphabetic characters no round can match: fail, emit it whole, or drop it.
NON_ALPHA_POLICIES = ("fail", "opaque", "skip")


def _check_policy(name: str, value: str, allowed: tuple[str, ...]) -> str:
    if value not in allowed:
        raise ValueError(f"{name} must be one of {', '.join(allowed)}; got {value!r}")
    return value


def is_alphabetic(ch: str) -> bool:
    return normalize(ch) in ALPHABET


class Segmenter:
    """Breaks boundary-free text into words from a read-only Dictionary."""

    def __init__(
        self,
        dictionary: Dictionary,
        separator: str = "none",
        on_unmatched: str = "fail",
        on_non_alpha: str = "fail",
    ):
        self.dict = dictionary
        self.separator = _check_policy("separator", separator, SEPARATOR_POLICIES)
        self.on_unmatched = _check_policy("on_unmatched", on_unmatched, UNMATCHED_POLICIES)
        self.on_non_alpha = _check_policy("on_non_alpha", on_non_alpha, NON_ALPHA_POLICIES)

    # public API

    def segment(self, text: str) -> Segmentation:
        """Split *text*; failures come back as a failed Segmentation, not an exception."""
        spans: list[tuple[int, int]] = []
        n = len(text)
        start = 0
        while start < n:
            end = self._longest_word(text, start)
            if end is not None:
                spans.append((start, end))
                start = self._after_word(end, n)
                continue

            span, start, error = self._recover(text, start)
            if error is not None:
                logger.debug("Segmentation failed: %s", error)
                return Segmentation.failure(text, error, spans)
            if span is not None:
                spans.append(span)
        return Segmentation.success(text, spans)

    def segment_many(self, texts: Iterable[str]) -> Iterator[Segmentation]:
        """One Segmentation per input; a failed input does not stop the rest."""
        for text in texts:
            yield self.segment(text)

    def split(self, text: str) -> list[str]:
        """Words of *text*, raising UnmatchedRun when it cannot be split."""
        return self.segment(text).unwrap()

    # rounds

    def _longest_word(self, text: str, start: int) -> int | None:
        """End offset of the word committed by the round at *start*, if any."""
        n = len(text)
        cursor = self.dict.cursor()
        best_match: int | None = None
        probe_end = start
        while probe_end < n:
            cursor.advance(text[probe_end])
            probe_end += 1
            is_word, is_extendable = cursor.state()
            if is_word:
                if not is_extendable or probe_end == n:
                    return probe_end
                best_match = probe_end
            elif not is_extendable:
                break

        if best_match is not None:
            logger.debug(
                "Backtracking from %d to %r at %d",
                probe_end, text[start:best_match], start,
            )
        return best_match

    def _after_word(self, end: int, n: int) -> int:
        if self.separator == "skip":
            return min(end + 1, n)
        return end

    def _recover(
        self, text: str, start: int,
    ) -> tuple[tuple[int, int] | None, int, UnmatchedRun | None]:
        """Apply the failure policies to the round at *start*.

        Returns the span to emit (or None), where the next round starts, and
        the error when the policy is to fail.
        """
        n = len(text)
        if not is_alphabetic(text[start]):
            run_end = start + 1
            while (
                run_end < n
                and not is_alphabetic(text[run_end])
                and self._longest_word(text, run_end) is None
            ):
                run_end += 1
            if self.on_non_alpha == "fail":
                return None, start, NonAlphabeticRun(start, text, text[start:run_end])
            logger.debug("Non-alphabetic run %r at %d: %s", text[start:run_end], start, self.on_non_alpha)
            if self.on_non_alpha == "opaque":
                return (start, run_end), self._after_word(run_end, n), None
            return None, run_end, None

        if self.on_unmatched == "fail":
            return None, start, UnmatchedRun(start, text)
        logger.debug("Unmatched character %r at %d: %s", text[start], start, self.on_unmatched)
        if self.on_unmatched == "single":
            return (start, start + 1), self._after_word(start + 1, n), None
        return None, start + 1, None
