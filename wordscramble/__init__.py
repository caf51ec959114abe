"""wordscramble: guess the four-letter word in five tries."""

__version__ = "0.1.0"
