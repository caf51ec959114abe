"""
Per-position feedback for a single (guess, target) pair.

Conventions:
  - the letter itself : correct letter in the correct position
  - '?'               : letter occurs somewhere else in the target
  - 'X'               : letter does not occur in the target

The default evaluation is a naive containment check: every guessed letter
that is not an exact hit is marked '?' whenever the target contains it,
regardless of how many times. So "aabb" against "abcd" gives a ? ? ?.

With count_letters=True the two-pass Wordle scheme is used instead:
  1) First pass marks exact hits and counts the target's unmatched letters.
  2) Second pass marks '?' only while that letter still has remaining count.
"""

from collections import Counter
from typing import List, Sequence

PRESENT = "?"
ABSENT = "X"


def evaluate(guess: str, target: str, *, count_letters: bool = False) -> List[str]:
    """
    Compute feedback symbols for `guess` against `target`.

    Preconditions:
      - len(guess) == len(target)

    Returns:
      - list of len(guess) symbols, each an exact letter, '?' or 'X'

    Examples:
      evaluate("blue", "blur") -> ['b', 'l', 'u', 'X']
      evaluate("aabb", "abcd") -> ['a', '?', '?', '?']
      evaluate("aabb", "abcd", count_letters=True) -> ['a', 'X', '?', 'X']
    """
    guess = guess.strip().lower()
    target = target.strip().lower()
    if len(guess) != len(target):
        raise ValueError(
            f"guess and target must be the same length ({len(guess)} != {len(target)})")

    if count_letters:
        return _evaluate_counted(guess, target)

    out: List[str] = []
    for g, t in zip(guess, target):
        if g == t:
            out.append(g)
        elif g in target:
            out.append(PRESENT)
        else:
            out.append(ABSENT)
    return out


def _evaluate_counted(guess: str, target: str) -> List[str]:
    out = [ABSENT] * len(guess)

    # Pass 1: exact hits, and leftover counts for everything else.
    remaining = Counter()
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            out[i] = g
        else:
            remaining[t] += 1

    # Pass 2: '?' only while the letter is still available.
    for i, g in enumerate(guess):
        if out[i] != ABSENT:
            continue
        if remaining[g] > 0:
            out[i] = PRESENT
            remaining[g] -= 1

    return out


def is_solved(symbols: Sequence[str], target: str) -> bool:
    """True when every symbol is the exact target letter."""
    return "".join(symbols) == target.lower()


def format_feedback(symbols: Sequence[str]) -> str:
    """
    Render symbols the way the game displays them.

    format_feedback(['b', 'l', 'u', 'X']) -> "Feedback: b l u X "
    """
    return "Feedback: " + "".join(f"{s} " for s in symbols)
