# apps/cli/simulate.py
"""
Self-play check of the candidate engine.

This script:
  1) Validates the word list (prints counts + SHA).
  2) Picks the cases (every usable word, or a deterministic sample by seed).
  3) Plays each case through a fresh engine with a live progress bar and
     prints success rate, mean guesses and any case where the pool ran dry
     (which would mean the filter dropped the true answer).

Usage:
    python -m apps.cli.simulate --dict-path data/words_5.txt --sample 200
"""

from __future__ import annotations

import argparse
import logging
import random
import sys

from tqdm import tqdm

from wordle_helper.dictionary import LoadError, load, pretty_summary, validate_wordlist
from wordle_helper.harness import MAX_TURNS, run_case


def main(argv=None):
    ap = argparse.ArgumentParser(description="wordle-helper — self-play over a word list")
    ap.add_argument("-d", "--dict-path", required=True, help="path to a word list")
    ap.add_argument("-w", "--word-length", type=int, default=5, help="word length (e.g., 5 or 6)")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--max-turns", type=int, default=MAX_TURNS, help="turn budget per game")
    ap.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    rep = validate_wordlist(args.word_length, args.dict_path)
    print(pretty_summary(rep))
    try:
        words = load(args.dict_path)
    except LoadError as e:
        print(str(e), file=sys.stderr)
        return 1

    # Lowercased, deduplicated answers in file order
    cases = list(dict.fromkeys(w.lower() for w in words if len(w) == args.word_length))
    rng = random.Random(args.seed)
    if args.sample and args.sample < len(cases):
        rng.shuffle(cases)
        cases = cases[: args.sample]

    results = []
    for idx, ans in enumerate(tqdm(cases, ncols=80, desc="Running", unit="game",
                                   disable=args.no_progress), 1):
        results.append(run_case(ans, words=words, N=args.word_length,
                                max_turns=args.max_turns, seed=args.seed + idx))

    total = len(results)
    if not total:
        print("No cases to run.")
        return 0

    wins = [r for r in results if r["success"]]
    dry = [r["answer"] for r in results if r["exhausted"]]
    mean_guesses = sum(r["guesses"] for r in wins) / len(wins) if wins else 0.0
    print(f"cases={total} | success={len(wins) / total:.1%} | mean guesses (wins)={mean_guesses:.2f}")
    if dry:
        print(f"pool ran dry for {len(dry)} case(s), e.g. {dry[:5]}")
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
