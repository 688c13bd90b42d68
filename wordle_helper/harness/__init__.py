from .core import run_case, run_batch, MAX_TURNS
from .input import InputState, colourful_hints

__all__ = ["run_case", "run_batch", "MAX_TURNS", "InputState", "colourful_hints"]
