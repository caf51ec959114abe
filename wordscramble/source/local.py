"""
Offline word source.

Picks uniformly at random from a validated word list on disk. Useful
without network access and for reproducible games (seeded RNG).
"""

from __future__ import annotations

import logging
import random
from pathlib import Path

from wordscramble.config import Settings
from wordscramble.datasets import validate_wordlist, pretty_summary
from wordscramble.errors import EmptyResponseError
from .base import WordSource, register

logger = logging.getLogger(__name__)


@register
class FileWordSource(WordSource):
    id = "file"
    name = "Word list file"

    def __init__(self, settings: Settings | None = None, *, path: str | Path,
                 seed: int | None = None):
        super().__init__(settings)
        self.report = validate_wordlist(self.N, path)
        logger.info("word list %s", pretty_summary(self.report))
        for issue in self.report["issues"]:
            logger.warning("word list %s: %s", path, issue)
        if not self.report["passed"]:
            raise EmptyResponseError(f"no usable words in {path}")

        self.words = list(self.report["words"])
        self.rng = random.Random(seed)

    def fetch_word(self) -> str:
        return self.words[self.rng.randrange(len(self.words))]
