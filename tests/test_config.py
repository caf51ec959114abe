import os
from pathlib import Path

import pytest

from wordscramble.config import RetryPolicy, Settings


def test_defaults():
    s = Settings()
    assert s.word_length == 4
    assert s.max_attempts == 5
    assert s.api_base_url == "https://random-word-api.herokuapp.com"
    assert s.strict_feedback is False


def test_from_env(monkeypatch, tmp_path: Path):
    monkeypatch.chdir(tmp_path)  # keep any real .env out of the way
    monkeypatch.setenv("WORDSCRAMBLE_API_BASE_URL", "http://localhost:9000/")
    monkeypatch.setenv("WORDSCRAMBLE_REQUEST_TIMEOUT", "2.5")
    monkeypatch.setenv("WORDSCRAMBLE_MAX_FETCH_ATTEMPTS", "7")
    monkeypatch.setenv("WORDSCRAMBLE_STATE_PATH", str(tmp_path / "p.json"))
    monkeypatch.setenv("WORDSCRAMBLE_STRICT_FEEDBACK", "yes")
    monkeypatch.setenv("WORDSCRAMBLE_LOG_LEVEL", "debug")

    s = Settings.from_env()
    assert s.api_base_url == "http://localhost:9000"
    assert s.request_timeout == 2.5
    assert s.retry.max_attempts == 7
    assert s.state_path == tmp_path / "p.json"
    assert s.strict_feedback is True
    assert s.log_level == "DEBUG"


def test_dotenv_file_is_read(monkeypatch, tmp_path: Path):
    monkeypatch.delenv("WORDSCRAMBLE_MAX_ATTEMPTS", raising=False)
    env = tmp_path / "custom.env"
    env.write_text("WORDSCRAMBLE_MAX_ATTEMPTS=8\n", encoding="utf-8")
    try:
        assert Settings.from_env(str(env)).max_attempts == 8
    finally:
        os.environ.pop("WORDSCRAMBLE_MAX_ATTEMPTS", None)


def test_with_overrides_ignores_none():
    s = Settings().with_overrides(api_base_url=None, log_level="INFO")
    assert s.api_base_url == Settings().api_base_url
    assert s.log_level == "INFO"


@pytest.mark.parametrize("attempt,expected", [(0, 0.0), (1, 0.1), (2, 0.2), (3, 0.4), (5, 1.0)])
def test_retry_delay(attempt, expected):
    policy = RetryPolicy(max_attempts=10, backoff=0.1, factor=2.0, max_backoff=1.0)
    assert policy.delay(attempt) == pytest.approx(expected)
