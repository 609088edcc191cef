"""CLI / terminal mode for the word breaker."""

from __future__ import annotations

import sys
import time
from collections.abc import Iterable, Iterator
from typing import TextIO

from wordbreak.result import Segmentation
from wordbreak.segmenter import Segmenter


def interactive_runs() -> Iterator[str]:
    """Runs typed at the prompt, until ``quit``, EOF or Ctrl-C."""
    print("\n" + "=" * 60)
    print("  WORD BREAKER -- type text without spaces")
    print("=" * 60)
    print()
    print("  quit                  -- leave")
    print()

    while True:
        try:
            inp = input("  text> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            return
        if inp.lower() == "quit":
            return
        yield from inp.split()


def stream_runs(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def print_result(result: Segmentation, join: bool = False) -> None:
    if not result.ok:
        print(f"  ! {result.text}: {result.error}", file=sys.stderr)
        return
    if join:
        print(" ".join(result.words))
    else:
        for word in result.words:
            print(word)


def run_cli(segmenter: Segmenter, stream: TextIO | None = None, join: bool = False) -> int:
    """Segment whitespace-separated runs and print them.  Returns the failure count."""
    runs: Iterable[str]
    if stream is None and sys.stdin.isatty():
        runs = interactive_runs()
    else:
        runs = stream_runs(stream if stream is not None else sys.stdin)

    t0 = time.time()
    total = failed = 0
    for result in segmenter.segment_many(runs):
        total += 1
        if not result.ok:
            failed += 1
        print_result(result, join=join)
    elapsed = time.time() - t0

    print(f"Segmented {total} run(s) in {elapsed:.2f}s, {failed} failed.", file=sys.stderr)
    return failed
