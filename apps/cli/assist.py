# apps/cli/assist.py
"""
Interactive word-guessing assistant.

This script:
  1) Loads a dictionary (a local file, or the default English list which is
     downloaded into the cache on first use) and prints a one-line summary.
  2) Loops over rounds: asks for the guessed word and its feedback
     (0=not matched, 1=any other spot, 2=exact), echoes the guess in colour,
     narrows the candidate pool and prints the remaining words.
  3) Stops when no candidate is left, or on Ctrl-D / Ctrl-C.

Usage:
    python -m apps.cli.assist --word-length 5 --dict-path data/words_alpha.txt
"""

from __future__ import annotations

import argparse
import logging
import sys

from colors import color  # pip install ansicolors

from wordle_helper import __version__
from wordle_helper.dictionary import LoadError, open_dictionary, pretty_summary, validate_wordlist
from wordle_helper.engine import CandidateEngine, FeedbackKind
from wordle_helper.harness import InputState

DEFAULT_WORD_LENGTH = 5
DEFAULT_SHOW = 50


def _confirm(prompt: str) -> bool:
    answer = input(color(f"{prompt} [y/N] ", fg="yellow"))
    return answer.strip().lower() in ("y", "yes")


def _ask(prompt: str, accept) -> None:
    """Prompt until `accept(line)` stops raising ValueError. EOF propagates."""
    while True:
        line = input(prompt + "\n")
        try:
            accept(line)
            return
        except ValueError as e:
            print(color(str(e), fg="red") + "\n", file=sys.stderr)


def _print_candidates(words: list[str], show: int) -> None:
    for w in words[:show]:
        print(w)
    if len(words) > show:
        print(f"... and {len(words) - show:,} more")


def run_session(engine: CandidateEngine, *, show: int = DEFAULT_SHOW) -> int:
    """Drive rounds until solved, the pool is empty, or input ends. Returns an exit code."""
    while True:
        print(f"There are {engine.remaining_count():,} words remaining.\n")

        state = InputState(engine.width)
        _ask("Please input your guessed word:", state.add_word)
        _ask("\nPlease input result (0=not matched, 1=any, 2=exact):", state.add_hint)

        print(state.colorized_input())
        word, hints = state.get()
        engine.submit(word, hints)

        if all(h.kind == FeedbackKind.EXACT_MATCH for h in hints):
            print(color(f"Solved: {word.upper()}", fg="green", style="bold"))
            return 0
        if engine.is_exhausted():
            print(color("No candidates are consistent with the feedback.", fg="red"))
            return 0
        _print_candidates(engine.remaining(), show)


def main(argv=None):
    """
    Parse CLI args, load the dictionary, and run the interactive loop.
    """
    ap = argparse.ArgumentParser(description="wordle-helper — narrow candidates from feedback")
    ap.add_argument("-w", "--word-length", type=int, default=DEFAULT_WORD_LENGTH,
                    help="word length (default 5)")
    ap.add_argument("-d", "--dict-path", default="",
                    help="path to a word list; empty downloads the default English list")
    ap.add_argument("--show", type=int, default=DEFAULT_SHOW,
                    help="max number of candidates printed per round")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    ap.add_argument("--version", action="version", version=__version__)
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        source = open_dictionary(args.dict_path, confirm=_confirm)
        words = source.extract_words(args.word_length)
    except LoadError as e:
        print(color(str(e), fg="red"), file=sys.stderr)
        return 1

    print(pretty_summary(validate_wordlist(args.word_length, str(source.path))))
    print(color("Welcome to WORDLE HELPER", style="bold") + "\n")

    engine = CandidateEngine(args.word_length, words)
    try:
        return run_session(engine, show=args.show)
    except (EOFError, KeyboardInterrupt):
        print()
        return 0


if __name__ == "__main__":
    sys.exit(main())
