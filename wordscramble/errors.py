"""
Exceptions raised by wordscramble.

Every error carries a short `user_message` that front ends show as a
transient notification. None of them is fatal to a running game.
"""

from __future__ import annotations


class WordScrambleError(Exception):
    """Base class for all game errors."""

    user_message = "Something went wrong"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.user_message)


class WordFetchError(WordScrambleError):
    """Raised when a target word could not be obtained."""

    user_message = "Failed to load word"


class NetworkError(WordFetchError):
    """Raised when the word service could not be reached."""

    user_message = "Error fetching word"


class EmptyResponseError(WordFetchError):
    """Raised when the word service answered without a usable word list."""

    user_message = "Failed to load word"


class RetryExhaustedError(WordFetchError):
    """Raised when no word of the right length arrived within the retry budget."""

    user_message = "Could not find a four-letter word. Try again."


class GuessError(WordScrambleError):
    """Base class for rejected guesses."""


class GuessValidationError(GuessError):
    """Raised when a guess does not have the required length."""

    user_message = "Please enter exactly 4 letters"


class TargetNotReadyError(GuessError):
    """Raised when a guess arrives before the target word is loaded."""

    user_message = "Word is not yet loaded. Please wait."
