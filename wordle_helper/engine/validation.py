"""
Lightweight guess validation.

A guess is acceptable iff it is a string of exactly N letters a–z (after
stripping and lowercasing). Dictionary membership is deliberately not
required: the user may play a word the local dictionary lacks, and
submitting it still narrows the pool.
"""


def validate_guess(word, N: int) -> bool:
    """Return True if `word` is a well-formed N-letter guess."""
    if not isinstance(word, str):
        return False

    w = word.strip().lower()
    return len(w) == N and w.isascii() and w.isalpha()
