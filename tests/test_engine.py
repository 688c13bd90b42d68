import pytest
from wordle_helper.engine import (
    FeedbackKind, Hint, parse_feedback, hints_from_pairs, shrink_hints, matches, to_digits,
    score, validate_guess,
)

A, P, X = FeedbackKind.ABSENT, FeedbackKind.PRESENT_ELSEWHERE, FeedbackKind.EXACT_MATCH


# --- N=5 golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("belle", "level", "02111"),
    ("level", "level", "22222"),
    ("lemon", "level", "22000"),
    ("cools", "scoop", "11201"),
    ("scoop", "scoop", "22222"),
    ("crane", "crane", "22222"),
    ("raise", "crane", "11002"),
    ("stare", "crane", "00212"),
])
def test_score_n5_golden(guess, answer, expected):
    assert score(guess, answer) == expected


# --- N=6 sample tests ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("settle", "letter", "022211"),
    ("little", "letter", "202201"),
    ("planet", "palate", "211011"),
    ("kitten", "tinket", "121121"),
])
def test_score_n6_samples(guess, answer, expected):
    assert score(guess, answer) == expected


def test_score_rejects_length_mismatch():
    with pytest.raises(ValueError):
        score("crane", "cranes")


def test_validate_guess_n5():
    assert validate_guess("CRANE", N=5) is True
    assert validate_guess(" crane\n", N=5) is True
    assert validate_guess("cranes", N=5) is False
    assert validate_guess("cr4ne", N=5) is False
    assert validate_guess(None, N=5) is False


def test_parse_feedback_bound():
    assert parse_feedback("bound", "00120") == [
        Hint("b", A, 0), Hint("o", A, 1), Hint("u", P, 2), Hint("n", X, 3), Hint("d", A, 4),
    ]


@pytest.mark.parametrize("digits", ["30120", "a0120", "001201", "0012"])
def test_parse_feedback_rejects_bad_digits(digits):
    with pytest.raises(ValueError):
        parse_feedback("apple", digits)


def test_hint_normalizes_case():
    h = Hint("B", 2, 0)
    assert h.letter == "b" and h.kind is X


def test_hints_from_pairs_uses_index_as_position():
    hints = hints_from_pairs([("r", 0), ("o", 2), ("b", 0)])
    assert [h.pos for h in hints] == [0, 1, 2]
    assert to_digits(hints) == "020"


def test_shrink_removes_absent_when_letter_is_exact():
    hints = [Hint("r", A, 0), Hint("o", X, 1), Hint("b", A, 2), Hint("o", A, 3), Hint("t", X, 4)]
    assert shrink_hints(hints) == [
        Hint("r", A, 0), Hint("o", X, 1), Hint("b", A, 2), Hint("t", X, 4),
    ]


def test_shrink_removes_absent_when_letter_is_present_elsewhere():
    hints = [Hint("t", A, 0), Hint("a", P, 1), Hint("y", P, 2), Hint("r", A, 3), Hint("a", A, 4)]
    assert shrink_hints(hints) == [
        Hint("t", A, 0), Hint("a", P, 1), Hint("y", P, 2), Hint("r", A, 3),
    ]


def test_shrink_keeps_repeated_absent_letters():
    hints = parse_feedback("dummy", "00000")
    assert shrink_hints(hints) == hints


@pytest.mark.parametrize("word,hint,expected", [
    ("hello", Hint("a", A, 0), True),
    ("early", Hint("a", A, 0), False),
    ("early", Hint("l", P, 2), True),
    ("hello", Hint("l", P, 2), False),   # 'l' sits at 2
    ("asset", Hint("l", P, 2), False),   # no 'l' at all
    ("asset", Hint("t", X, 4), True),
    ("hello", Hint("t", X, 4), False),
])
def test_matches_single_hint(word, hint, expected):
    assert matches(word, [hint]) is expected
