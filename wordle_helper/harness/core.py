"""
Self-play harness.

- run_case:  play one hidden answer through a fresh CandidateEngine, guessing
             a (seeded) random remaining candidate each turn.
- run_batch: run many answers in sequence (optionally a sample prefix).

The answer is only used to compute the feedback a real game would show; the
engine itself sees nothing but (guess, feedback), exactly as in a live session.
These functions are UI-agnostic so they can be reused by the CLI or tests.
"""

from __future__ import annotations

import logging
import random
import time
from typing import Dict, Iterable, List, Tuple

from wordle_helper.engine import CandidateEngine, score

log = logging.getLogger(__name__)

MAX_TURNS = 6


def run_case(
        answer: str,
        *,
        words: Iterable[str],
        N: int,
        max_turns: int = MAX_TURNS,
        seed: int | None = None,
) -> Dict:
    """
    Execute one game until the answer is guessed, the pool runs dry, or the
    turn budget is exhausted.

    Args:
        answer:     the hidden word for this case
        words:      dictionary handed to the engine
        N:          word length
        max_turns:  turn budget
        seed:       RNG seed for reproducible guess picks

    Returns:
        dict with keys:
            answer, success (bool), guesses (int), time_ms (float),
            history (list[(guess, digits)]), remaining (list[int], pool size
            after each turn), exhausted (bool)
    """
    answer = answer.strip().lower()
    rng = random.Random(seed)
    engine = CandidateEngine(N, words)

    history: List[Tuple[str, str]] = []
    remaining: List[int] = []
    success = False

    t0 = time.perf_counter()
    for _ in range(max_turns):
        pool = engine.remaining()
        if not pool:
            break

        guess = pool[rng.randrange(len(pool))]
        digits = score(guess, answer)
        history.append((guess, digits))

        engine.submit(guess, digits)
        remaining.append(engine.remaining_count())

        if guess == answer:
            success = True
            break

    dt = (time.perf_counter() - t0) * 1000.0
    log.debug("case %s: success=%s in %d guess(es)", answer, success, len(history))
    return {
        "answer": answer,
        "success": success,
        "guesses": len(history),
        "time_ms": dt,
        "history": history,
        "remaining": remaining,
        "exhausted": engine.is_exhausted() and not success,
    }


def run_batch(
        answers: List[str],
        *,
        words: List[str],
        N: int,
        max_turns: int = MAX_TURNS,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    answers (after filtering to length N) are used.

    Each case's seed is derived from the base seed (seed + index) so runs are
    reproducible but not identical across cases.
    """
    pool = [w.strip().lower() for w in answers if len(w.strip()) == N]
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, ans in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(ans, words=words, N=N, max_turns=max_turns, seed=case_seed))
    return out
