from .engine import CandidateEngine, FeedbackKind, Hint, InvalidFeedbackLength
from .dictionary import LoadError

__version__ = "0.3.0"

__all__ = ["CandidateEngine", "FeedbackKind", "Hint", "InvalidFeedbackLength", "LoadError"]
