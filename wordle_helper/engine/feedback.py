"""
Per-letter feedback model and the filtering predicate.

Conventions (digit codes typed by the user):
  - 0 : ABSENT            = letter not in the secret (or fully accounted for)
  - 1 : PRESENT_ELSEWHERE = letter in the secret, but not at this position
  - 2 : EXACT_MATCH       = letter in the secret at exactly this position

A feedback for a guess of length N is a list of N `Hint`s, one per position.

Two steps turn a feedback into a filter:
  1) shrink_hints: drop ABSENT hints for letters that also carry a positive
     hint in the same feedback (repeated letters in a guess).
  2) matches: a word survives iff it satisfies every remaining hint.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List, Sequence, Tuple, Union


class FeedbackKind(IntEnum):
    ABSENT = 0
    PRESENT_ELSEWHERE = 1
    EXACT_MATCH = 2


@dataclass(frozen=True)
class Hint:
    """One (letter, kind) entry; `pos` is the index of the entry in its feedback."""
    letter: str
    kind: FeedbackKind
    pos: int

    def __post_init__(self):
        letter = self.letter.strip().lower()
        if len(letter) != 1:
            raise ValueError(f"hint letter must be a single character; got {self.letter!r}")
        # frozen dataclass: bypass __setattr__ for normalization
        object.__setattr__(self, "letter", letter)
        object.__setattr__(self, "kind", FeedbackKind(self.kind))

    @property
    def positive(self) -> bool:
        return self.kind != FeedbackKind.ABSENT


# Anything `coerce_feedback` understands.
FeedbackLike = Union[str, Sequence[Hint], Sequence[Tuple[str, int]]]


def parse_feedback(guess: str, digits: str) -> List[Hint]:
    """
    Build hints from a guess and a digit string, e.g.
      parse_feedback("bound", "00120") -> [b:0, o:0, u:1@2, n:2@3, d:0]

    Raises ValueError on a length mismatch or a character outside 0/1/2.
    """
    guess = guess.strip().lower()
    digits = digits.strip()
    if len(digits) != len(guess):
        raise ValueError(f"feedback has {len(digits)} digit(s) for a {len(guess)}-letter guess")

    hints: List[Hint] = []
    for i, (c, d) in enumerate(zip(guess, digits)):
        if d not in "012":
            raise ValueError("input must be 0,1,2")
        hints.append(Hint(c, FeedbackKind(int(d)), i))
    return hints


def hints_from_pairs(pairs: Iterable[Tuple[str, int]]) -> List[Hint]:
    """[(char, code), ...] -> hints; the index of each pair is its position."""
    return [Hint(c, FeedbackKind(code), i) for i, (c, code) in enumerate(pairs)]


def coerce_feedback(guess: str, feedback: FeedbackLike) -> List[Hint]:
    """
    Accept the three caller-facing encodings and return a list of hints:
      - a digit string ("00120"), read against `guess`
      - a sequence of Hint objects (returned as a list, unchanged)
      - a sequence of (char, code) pairs
    """
    if isinstance(feedback, str):
        return parse_feedback(guess, feedback)
    items = list(feedback)
    n_hints = sum(isinstance(h, Hint) for h in items)
    if n_hints == len(items):
        return items
    if n_hints:
        raise ValueError("feedback mixes Hint objects and (char, code) pairs")
    return hints_from_pairs(items)


def shrink_hints(hints: Sequence[Hint]) -> List[Hint]:
    """
    Drop ABSENT hints whose letter also has a PRESENT_ELSEWHERE or EXACT_MATCH
    hint in the same feedback. Order of the surviving hints is preserved.

    Example (guess "robot" against a secret with one 'o' at index 1):
      r:0, o:2@1, b:0, o:0, t:2@4  ->  r:0, o:2@1, b:0, t:2@4
    """
    positive_letters = {h.letter for h in hints if h.positive}
    return [h for h in hints if h.positive or h.letter not in positive_letters]


def satisfies(word: str, hint: Hint) -> bool:
    """Check a single hint against a candidate word."""
    if hint.kind == FeedbackKind.ABSENT:
        return hint.letter not in word
    if hint.kind == FeedbackKind.PRESENT_ELSEWHERE:
        return hint.letter in word and word[hint.pos] != hint.letter
    return word[hint.pos] == hint.letter


def matches(word: str, hints: Iterable[Hint]) -> bool:
    """
    True iff `word` satisfies every hint. Hints are applied as given; callers
    that want the repeated-letter rule pass them through `shrink_hints` first.
    """
    return all(satisfies(word, h) for h in hints)


def to_digits(hints: Iterable[Hint]) -> str:
    """Inverse of parse_feedback for display/logging: hints -> "00120"."""
    return "".join(str(int(h.kind)) for h in hints)
