import pytest
from wordscramble.engine import evaluate, format_feedback, is_solved, normalize_guess
from wordscramble.errors import GuessValidationError

# --- naive containment feedback (repeated letters not counted) ---
@pytest.mark.parametrize("guess,target,expected", [
    ("blue", "blur", ["b", "l", "u", "X"]),
    ("aabb", "abcd", ["a", "?", "?", "?"]),
    ("blur", "blur", ["b", "l", "u", "r"]),
    ("rulb", "blur", ["?", "?", "?", "?"]),
    ("wxyz", "blur", ["X", "X", "X", "X"]),
    ("BLUE", "blur", ["b", "l", "u", "X"]),
    ("mood", "room", ["?", "o", "o", "X"]),
])
def test_evaluate_golden(guess, target, expected):
    assert evaluate(guess, target) == expected

@pytest.mark.parametrize("word", ["blur", "abcd", "zzzz", "room"])
def test_evaluate_self_is_all_exact(word):
    out = evaluate(word, word)
    assert out == list(word)
    assert is_solved(out, word)

def test_evaluate_always_four_symbols():
    for g in ["abcd", "dcba", "aaaa", "xyzw"]:
        assert len(evaluate(g, "blur")) == 4

def test_evaluate_rejects_length_mismatch():
    with pytest.raises(ValueError):
        evaluate("abc", "blur")

# --- counted feedback (opt-in) ---
@pytest.mark.parametrize("guess,target,expected", [
    ("aabb", "abcd", ["a", "X", "?", "X"]),
    ("blue", "blur", ["b", "l", "u", "X"]),
    ("llll", "ball", ["X", "X", "l", "l"]),
])
def test_evaluate_counted(guess, target, expected):
    assert evaluate(guess, target, count_letters=True) == expected

def test_format_feedback():
    assert format_feedback(["b", "l", "u", "X"]) == "Feedback: b l u X "
    assert not is_solved(["b", "l", "u", "X"], "blur")

def test_normalize_guess():
    assert normalize_guess("BLUE") == "blue"
    assert normalize_guess("abcde", N=5) == "abcde"
    for bad in ["abc", "abcde", "", None, "blue ", " blur", "blur\n"]:
        with pytest.raises(GuessValidationError):
            normalize_guess(bad)
