"""
Runtime configuration.

All settings come from WORDSCRAMBLE_* environment variables (a local .env
file is honoured) with sensible defaults. The CLI overrides individual
fields with its own flags.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "WORDSCRAMBLE_"

# Game rules
WORD_LENGTH = 4
MAX_ATTEMPTS = 5

# Persistence layout
STORE_NAMESPACE = "gameState"
ATTEMPTS_KEY = "attempts"

DEFAULT_API_BASE_URL = "https://random-word-api.herokuapp.com"
DEFAULT_STATE_PATH = Path.home() / ".wordscramble" / "preferences.json"


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(ENV_PREFIX + name, default)


def _env_bool(name: str, default: bool = False) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class RetryPolicy:
    """How often, and how patiently, to re-ask for a word of the right length."""
    max_attempts: int = 50
    backoff: float = 0.05       # seconds before the second request
    factor: float = 1.5         # growth per further request
    max_backoff: float = 1.0    # ceiling for a single wait

    def delay(self, attempt: int) -> float:
        """Wait before request number `attempt + 1` (attempt is 1-based)."""
        if attempt < 1:
            return 0.0
        return min(self.backoff * (self.factor ** (attempt - 1)), self.max_backoff)


@dataclass(frozen=True)
class Settings:
    api_base_url: str = DEFAULT_API_BASE_URL
    request_timeout: float = 10.0
    retry: RetryPolicy = field(default_factory=RetryPolicy)
    word_length: int = WORD_LENGTH
    max_attempts: int = MAX_ATTEMPTS
    state_path: Path = DEFAULT_STATE_PATH
    strict_feedback: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> "Settings":
        """Build settings from the environment (after loading .env)."""
        load_dotenv(dotenv_path)
        retry = RetryPolicy(
            max_attempts=int(_env("MAX_FETCH_ATTEMPTS", "50")),
            backoff=float(_env("FETCH_BACKOFF", "0.05")),
            factor=float(_env("FETCH_BACKOFF_FACTOR", "1.5")),
            max_backoff=float(_env("FETCH_MAX_BACKOFF", "1.0")),
        )
        return cls(
            api_base_url=_env("API_BASE_URL", DEFAULT_API_BASE_URL).rstrip("/"),
            request_timeout=float(_env("REQUEST_TIMEOUT", "10")),
            retry=retry,
            max_attempts=int(_env("MAX_ATTEMPTS", str(MAX_ATTEMPTS))),
            state_path=Path(_env("STATE_PATH", str(DEFAULT_STATE_PATH))).expanduser(),
            strict_feedback=_env_bool("STRICT_FEEDBACK"),
            log_level=_env("LOG_LEVEL", "WARNING").upper(),
        )

    def with_overrides(self, **changes) -> "Settings":
        """Copy with the given fields replaced; None values are ignored."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
