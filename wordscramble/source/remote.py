"""
Random word service client.

Strategy:
  - GET {base_url}/word?number=1; the body is a JSON list of strings and
    only the first element is consulted.
  - A word of the wrong length (or with non-letters) triggers another
    request, waiting per the RetryPolicy between requests. After
    `max_attempts` requests without a usable word, RetryExhaustedError.
  - Transport failures and empty/invalid bodies are reported at once and
    never retried.
"""

from __future__ import annotations

import logging
import time
from typing import Callable

import requests

from wordscramble.config import Settings
from wordscramble.errors import EmptyResponseError, NetworkError, RetryExhaustedError
from .base import WordSource, register

logger = logging.getLogger(__name__)

WORD_PATH = "/word"


@register
class HttpWordSource(WordSource):
    id = "http"
    name = "Random Word API"

    def __init__(self, settings: Settings | None = None, *,
                 session: requests.Session | None = None,
                 sleep: Callable[[float], None] = time.sleep):
        super().__init__(settings)
        self.url = self.settings.api_base_url.rstrip("/") + WORD_PATH
        self.session = session or requests.Session()
        self._sleep = sleep

    def _request_once(self) -> str:
        try:
            resp = self.session.get(self.url, params={"number": 1},
                                    timeout=self.settings.request_timeout)
        except requests.RequestException as e:
            raise NetworkError(f"GET {self.url} failed: {e}") from e

        if not resp.ok:
            raise EmptyResponseError(f"GET {self.url} returned HTTP {resp.status_code}")

        try:
            body = resp.json()
        except ValueError as e:
            raise EmptyResponseError(f"GET {self.url} returned a non-JSON body") from e

        if not isinstance(body, list) or not body or not isinstance(body[0], str):
            raise EmptyResponseError(f"GET {self.url} returned no words: {body!r}")
        return body[0]

    def fetch_word(self) -> str:
        policy = self.settings.retry
        for attempt in range(1, policy.max_attempts + 1):
            word = self._request_once().strip().lower()
            if self.accepts(word):
                logger.debug("accepted %r after %d request(s)", word, attempt)
                return word

            logger.debug("rejected %r (need %d letters), attempt %d/%d",
                         word, self.N, attempt, policy.max_attempts)
            if attempt < policy.max_attempts:
                self._sleep(policy.delay(attempt))

        logger.warning("no %d-letter word after %d requests", self.N, policy.max_attempts)
        raise RetryExhaustedError(
            f"no {self.N}-letter word after {policy.max_attempts} requests")

    def close(self) -> None:
        self.session.close()
