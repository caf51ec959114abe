from __future__ import annotations
from typing import Dict, Type

from wordscramble.config import Settings

# ---- Global word source registry ----
REGISTRY: Dict[str, Type["WordSource"]] = {}


def register(cls: Type["WordSource"]) -> Type["WordSource"]:
    """
    Decorator: @register on a source class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate word source id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that word sources inherit ----
class WordSource:
    id = "base"
    name = "Base"

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or Settings()
        self.N: int = self.settings.word_length

    def accepts(self, word: str) -> bool:
        """True if `word` (already lowercased) can be a target word."""
        return len(word) == self.N and word.isascii() and word.isalpha()

    def fetch_word(self) -> str:
        """
        Return one lowercase target word of length N.

        Blocks until a word is available; raises a WordFetchError subclass
        otherwise.
        """
        raise NotImplementedError("Override in subclass")

    def close(self) -> None:
        pass
