from __future__ import annotations
from typing import List
from .base import WordSource, REGISTRY, register

from . import remote  # noqa: F401
from . import local  # noqa: F401
from .fetcher import WordFetcher

from wordscramble.config import Settings


def create_source(source_id: str, settings: Settings | None = None, **kwargs) -> WordSource:
    """
    Factory: instantiate a registered word source by id.
    """
    try:
        cls = REGISTRY[source_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown word source: {source_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(settings, **kwargs)


def get_source_ids() -> List[str]:
    """
    Return all registered source ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


def describe_sources() -> List[str]:
    """
    "id (name)" for every registered source, in id order, for help texts.
    """
    return [f"{sid} ({REGISTRY[sid].name})" for sid in get_source_ids()]


__all__ = ["WordSource", "WordFetcher", "REGISTRY", "register", "create_source",
           "get_source_ids", "describe_sources"]
