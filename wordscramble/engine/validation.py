"""
Guess validation.

A guess is accepted iff it has exactly N characters as typed. Surrounding
whitespace counts towards the length; front ends that want to trim input
do so before handing it over. There is no dictionary check: any four
characters count as an attempt.
"""

from wordscramble.errors import GuessValidationError


def normalize_guess(word: str, N: int = 4) -> str:
    """
    Return the lowercase form of `word`, or raise GuessValidationError.

    Args:
      word : raw user input
      N    : required length
    """
    if not isinstance(word, str) or len(word) != N:
        raise GuessValidationError()
    return word.lower()
