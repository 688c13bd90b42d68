"""
Reference feedback for a single (guess, answer) pair.

The assistant never knows the answer; this is what the game itself computes.
The harness and tests use it to produce the feedback a real round would give.

Conventions (same digits the user types):
  - '2' : correct letter in the correct position
  - '1' : correct letter in the wrong position
  - '0' : letter not present (or present fewer times than guessed)

Algorithm (two-pass, duplicate-safe):
  1) First pass marks all exact matches and counts the remaining (unmatched)
     letters from the answer.
  2) Second pass marks '1' only if the letter still has remaining count.
"""

from collections import Counter


def score(guess: str, answer: str) -> str:
    """
    Compute the feedback digits for `guess` against `answer`.

    Preconditions:
      - len(guess) == len(answer)

    Examples:
      score("belle", "level") -> "02111"
      score("lemon", "level") -> "22000"
    """
    guess = guess.strip().lower()
    answer = answer.strip().lower()
    if len(guess) != len(answer):
        raise ValueError("guess and answer must be the same length")

    pattern = ["0"] * len(guess)

    # Pass 1: exact matches; count the answer's letters that are left over
    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = "2"
        else:
            remaining[a] += 1

    # Pass 2: misplaced letters, capped by the answer's multiplicity
    for i, g in enumerate(guess):
        if pattern[i] == "2":
            continue
        if remaining[g] > 0:
            pattern[i] = "1"
            remaining[g] -= 1

    return "".join(pattern)
