"""
Background word fetching with latest-request-wins semantics.

fetch() hands source.fetch_word() to an executor and returns the Future.
Each call gets a new generation number and cancels the previous request
if it has not started yet. When a request finishes,
on_done(generation, word, error) runs only if no newer request has been
issued since; otherwise the result is dropped. Exactly one of `word` /
`error` is set.

on_done runs on the worker thread. A caller that serializes state behind
its own lock must re-check is_current(generation) once it holds that lock:
a newer request can be issued in between.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Callable, Optional

from wordscramble.errors import WordFetchError
from .base import WordSource

logger = logging.getLogger(__name__)

FetchCallback = Callable[[int, Optional[str], Optional[WordFetchError]], None]


class WordFetcher:
    def __init__(self, source: WordSource, executor: Executor | None = None):
        self.source = source
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(max_workers=1,
                                                        thread_name_prefix="word-fetch")
        self._lock = threading.Lock()
        self._generation = 0
        self._pending: Future | None = None

    @property
    def generation(self) -> int:
        return self._generation

    def is_current(self, generation: int) -> bool:
        with self._lock:
            return generation == self._generation

    def fetch(self, on_done: FetchCallback) -> Future:
        with self._lock:
            self._generation += 1
            generation = self._generation
            if self._pending is not None and self._pending.cancel():
                logger.debug("cancelled pending fetch before it started")

        future = self._executor.submit(self.source.fetch_word)
        with self._lock:
            if generation == self._generation:
                self._pending = future
        future.add_done_callback(lambda f: self._complete(generation, f, on_done))
        return future

    def cancel(self) -> None:
        """Invalidate every outstanding request."""
        with self._lock:
            self._generation += 1
            if self._pending is not None:
                self._pending.cancel()
            self._pending = None

    def _complete(self, generation: int, future: Future, on_done: FetchCallback) -> None:
        if future.cancelled():
            return
        if not self.is_current(generation):
            logger.info("dropping result of stale fetch #%d", generation)
            return

        error = future.exception()
        if error is None:
            on_done(generation, future.result(), None)
        elif isinstance(error, WordFetchError):
            on_done(generation, None, error)
        else:
            logger.exception("unexpected error while fetching a word", exc_info=error)
            on_done(generation, None, WordFetchError(str(error)))

    def close(self) -> None:
        self.cancel()
        if self._owns_executor:
            self._executor.shutdown(wait=False, cancel_futures=True)
        self.source.close()
