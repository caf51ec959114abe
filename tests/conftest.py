from concurrent.futures import Executor, Future
from pathlib import Path
from typing import List

import pytest
import requests

from wordscramble.source import WordSource
from wordscramble.state import GameState, PreferencesStore


class InlineExecutor(Executor):
    """Runs submitted work immediately on the calling thread."""

    def submit(self, fn, /, *args, **kwargs):
        f = Future()
        f.set_running_or_notify_cancel()
        try:
            f.set_result(fn(*args, **kwargs))
        except BaseException as e:
            f.set_exception(e)
        return f


class DeferredExecutor(Executor):
    """Holds submitted work until the test runs it, to control completion order."""

    def __init__(self, started: bool = True):
        self.started = started
        self.jobs: List[tuple] = []

    def submit(self, fn, /, *args, **kwargs):
        f = Future()
        if self.started:
            f.set_running_or_notify_cancel()
        self.jobs.append((f, fn, args, kwargs))
        return f

    def run(self, index: int) -> None:
        f, fn, args, kwargs = self.jobs[index]
        if not self.started and not f.set_running_or_notify_cancel():
            return
        try:
            f.set_result(fn(*args, **kwargs))
        except BaseException as e:
            f.set_exception(e)


class ScriptedSource(WordSource):
    """Returns (or raises) the given items in order."""

    def __init__(self, items):
        super().__init__()
        self.items = list(items)
        self.calls = 0
        self.closed = False

    def fetch_word(self) -> str:
        self.calls += 1
        item = self.items.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    def close(self) -> None:
        self.closed = True


def make_response(status: int = 200, content: bytes = b'["blue"]') -> requests.Response:
    r = requests.Response()
    r.status_code = status
    r._content = content
    r.encoding = "utf-8"
    return r


class FakeSession:
    """Stands in for requests.Session; replays responses or raises."""

    def __init__(self, replies):
        self.replies = list(replies)
        self.calls = []
        self.closed = False

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        reply = self.replies.pop(0)
        if isinstance(reply, BaseException):
            raise reply
        return reply

    def close(self):
        self.closed = True


@pytest.fixture
def store(tmp_path: Path) -> PreferencesStore:
    return PreferencesStore(tmp_path / "prefs.json")


@pytest.fixture
def state(store: PreferencesStore) -> GameState:
    return GameState(store)
