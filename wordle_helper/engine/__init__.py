from .feedback import (
    FeedbackKind, Hint, parse_feedback, hints_from_pairs, shrink_hints, matches, to_digits,
)
from .candidates import CandidateEngine, InvalidFeedbackLength
from .scoring import score
from .validation import validate_guess

__all__ = [
    "FeedbackKind", "Hint", "parse_feedback", "hints_from_pairs", "shrink_hints", "matches",
    "to_digits", "CandidateEngine", "InvalidFeedbackLength", "score", "validate_guess",
]
