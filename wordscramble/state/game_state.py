"""
The single active round: target word plus attempt counter.

Only the attempt counter is persisted; the target word is fetched anew
on every start.
"""

from __future__ import annotations

import logging
from typing import Optional

from wordscramble.config import ATTEMPTS_KEY, STORE_NAMESPACE, WORD_LENGTH
from .store import PreferencesStore

logger = logging.getLogger(__name__)


class GameState:
    def __init__(self, store: PreferencesStore, *, word_length: int = WORD_LENGTH):
        self.store = store
        self.word_length = word_length
        self.target_word: Optional[str] = None
        self.attempts: int = 0

    @property
    def has_target(self) -> bool:
        return self.target_word is not None

    def load(self) -> int:
        """Restore the persisted attempt count (0 if nothing was saved)."""
        self.attempts = max(0, self.store.get_int(STORE_NAMESPACE, ATTEMPTS_KEY, 0))
        logger.debug("loaded attempts=%d", self.attempts)
        return self.attempts

    def save(self, reset: bool = False) -> None:
        """Persist 0 when `reset`, otherwise the current attempt count."""
        self.store.put_int(STORE_NAMESPACE, ATTEMPTS_KEY, 0 if reset else self.attempts)

    def begin_round(self, word: str) -> None:
        if len(word) != self.word_length:
            raise ValueError(f"target word must have {self.word_length} letters: {word!r}")
        self.target_word = word.lower()

    def end_round(self) -> None:
        self.target_word = None
        self.attempts = 0

    def increment(self) -> int:
        self.attempts += 1
        return self.attempts
