"""
Candidate pool narrowing given per-letter feedback.

Given:
  - a word length N (the engine's `width`)
  - a dictionary (any iterable of strings)
  - one feedback per round for the word the user guessed

Keep:
  - words that are consistent with ALL feedback seen so far.

This is the core step that turns feedback into a shrinking candidate set.
The pool never grows; an empty pool means no dictionary word fits the
feedback, which callers report to the user rather than treat as an error.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

from .feedback import FeedbackLike, Hint, coerce_feedback, matches, shrink_hints, to_digits

log = logging.getLogger(__name__)


class InvalidFeedbackLength(ValueError):
    """Raised when a feedback does not carry one entry per letter."""

    def __init__(self, expected: int, got: int):
        super().__init__(f"feedback must have {expected} entries; got {got}")
        self.expected = expected
        self.got = got


class CandidateEngine:
    """
    Holds the live candidate pool for one session.

    Words are normalized (stripped, lowercased) on the way in; words whose
    length differs from `width` are dropped silently. Duplicates keep their
    first dictionary position.
    """

    def __init__(self, width: int, words: Iterable[str]):
        self.width = int(width)
        # dict keeps insertion order and gives O(1) removal
        self._pool = dict.fromkeys(
            w for w in (raw.strip().lower() for raw in words) if len(w) == self.width
        )
        self.history: List[Tuple[str, List[Hint]]] = []
        log.debug("engine seeded with %d word(s) of length %d", len(self._pool), self.width)

    def remaining(self) -> List[str]:
        """Current pool in dictionary order (a copy; safe to keep)."""
        return list(self._pool)

    def remaining_count(self) -> int:
        return len(self._pool)

    def is_exhausted(self) -> bool:
        return not self._pool

    def __contains__(self, word: str) -> bool:
        return word.strip().lower() in self._pool

    def __len__(self) -> int:
        return len(self._pool)

    def submit(self, guess: str, feedback: FeedbackLike) -> None:
        """
        Apply one round of feedback.

        Args:
          guess    : the word that was played (any case)
          feedback : `width` entries as Hint objects, (char, code) pairs or a
                     digit string. An empty feedback only removes the guess.

        Raises:
          InvalidFeedbackLength if feedback is neither empty nor `width` long.
        """
        if isinstance(feedback, str):
            feedback = feedback.strip()
        if len(feedback) not in (0, self.width):
            raise InvalidFeedbackLength(self.width, len(feedback))
        hints = coerce_feedback(guess, feedback) if len(feedback) else []

        before = len(self._pool)

        # 1) a played word is never suggested again
        self._pool.pop(guess.strip().lower(), None)

        # 2) repeated letters: positive hints override ABSENT for the same letter
        effective = shrink_hints(hints)

        # 3) keep only words satisfying every surviving hint
        if effective:
            self._pool = {w: None for w in self._pool if matches(w, effective)}

        self.history.append((guess.strip().lower(), effective))
        if log.isEnabledFor(logging.DEBUG):
            log.debug(
                "submit %s [%s]: %d -> %d candidate(s)",
                guess, to_digits(hints), before, len(self._pool),
            )
