#!/usr/bin/env python3
"""
Word Breaker

Reads runs of text without spaces (from the terminal or a pipe) and splits
each one into dictionary words, taking the longest word it can at every
position and backing off one step when a longer probe dead-ends.

Usage:
    python break_sentence.py --dict dictionary.txt
    echo "thecatsatonthemat" | python break_sentence.py --join
"""

from __future__ import annotations

import argparse
import logging
import sys

from wordbreak.cli import run_cli
from wordbreak.dictionary import Dictionary
from wordbreak.segmenter import NON_ALPHA_POLICIES, SEPARATOR_POLICIES, UNMATCHED_POLICIES, Segmenter


# Logging setup

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger("wordbreak")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Word Breaker -- splits text without spaces into dictionary words",
    )
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to dictionary / word list file")
    parser.add_argument("--separator", choices=SEPARATOR_POLICIES, default="none",
                        help="Characters consumed between words: none, or exactly one")
    parser.add_argument("--on-unmatched", choices=UNMATCHED_POLICIES, default="fail",
                        help="What to do with a letter no word starts with")
    parser.add_argument("--on-non-alpha", choices=NON_ALPHA_POLICIES, default="fail",
                        help="What to do with a run of non-letters no word starts with")
    parser.add_argument("--join", action="store_true",
                        help="Print each run's words on one line")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    return parser


# Entry point

def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    dictionary = Dictionary.load(args.dict)
    segmenter = Segmenter(
        dictionary,
        separator=args.separator,
        on_unmatched=args.on_unmatched,
        on_non_alpha=args.on_non_alpha,
    )
    failed = run_cli(segmenter, join=args.join)
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
