"""
One round of user input: the guessed word, then its 0/1/2 feedback.

InputState validates each piece as it is typed so the CLI can re-prompt on
a ValueError without losing the other half of the round.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from colors import color  # pip install ansicolors

from wordle_helper.engine import FeedbackKind, Hint, parse_feedback, validate_guess

# ansicolors keyword arguments per feedback kind
COLOUR_ABSENT = dict(style="bold")
COLOUR_PRESENT_ELSEWHERE = dict(bg="yellow", style="bold")
COLOUR_EXACT_MATCH = dict(bg="green", style="bold")

_COLOURS = {
    FeedbackKind.ABSENT: COLOUR_ABSENT,
    FeedbackKind.PRESENT_ELSEWHERE: COLOUR_PRESENT_ELSEWHERE,
    FeedbackKind.EXACT_MATCH: COLOUR_EXACT_MATCH,
}


def colourful_hints(hints: List[Hint]) -> str:
    """Each letter wrapped in the ANSI codes for its feedback kind."""
    return "".join(color(h.letter.upper(), **_COLOURS[h.kind]) for h in hints)


class InputState:
    def __init__(self, width: int):
        self.width = width
        self.word: Optional[str] = None
        self.hints: List[Hint] = []

    def add_word(self, text: str) -> None:
        w = text.strip().lower()
        if len(w) != self.width:
            raise ValueError("invalid word length")
        if not validate_guess(w, self.width):
            raise ValueError("word must contain letters a-z only")
        self.word = w
        self.hints = []

    def add_hint(self, text: str) -> None:
        if self.word is None:
            raise ValueError("add word before")
        digits = text.strip()
        if len(digits) != self.width:
            raise ValueError("invalid length")
        self.hints = parse_feedback(self.word, digits)

    def _require_complete(self) -> None:
        if self.word is None:
            raise ValueError("word is empty")
        if not self.hints:
            raise ValueError("hints are empty")

    def colorized_input(self) -> str:
        self._require_complete()
        return colourful_hints(self.hints)

    def get(self) -> Tuple[str, List[Hint]]:
        self._require_complete()
        return self.word, list(self.hints)
