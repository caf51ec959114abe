"""
Game controller: one round at a time, from word fetch to win/loss.

Phases:
  AWAITING_WORD  -> AWAITING_GUESS  when the fetcher delivers a target word
  AWAITING_GUESS -> AWAITING_GUESS  on a miss with attempts left
  AWAITING_GUESS -> ROUND_OVER      on a hit, or on a miss using the last attempt
  ROUND_OVER     -> AWAITING_WORD   immediately: attempts reset, saved, new fetch

The controller owns the three display texts (attempts, feedback, result)
and reports anything transient through `notify`. Rejected guesses and
failed fetches never change the round.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from wordscramble.config import MAX_ATTEMPTS
from wordscramble.engine import evaluate, format_feedback, is_solved, normalize_guess
from wordscramble.errors import GuessError, TargetNotReadyError, WordFetchError
from wordscramble.source import WordFetcher
from wordscramble.state import GameState

logger = logging.getLogger(__name__)


class Phase(Enum):
    AWAITING_WORD = "awaiting_word"
    AWAITING_GUESS = "awaiting_guess"
    ROUND_OVER = "round_over"


class RoundOutcome(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


@dataclass
class GuessResult:
    """The most recent guess and what came of it."""
    accepted: bool
    guess: Optional[str] = None
    feedback: List[str] = field(default_factory=list)
    outcome: RoundOutcome = RoundOutcome.IN_PROGRESS
    attempts: int = 0
    answer: Optional[str] = None  # only once the round is over
    message: Optional[str] = None  # notification for rejected guesses


def _ignore(message: str) -> None:
    pass


class GameController:
    def __init__(self, state: GameState, fetcher: WordFetcher, *,
                 notify: Callable[[str], None] = _ignore,
                 max_attempts: int = MAX_ATTEMPTS,
                 strict_feedback: bool = False):
        self.state = state
        self.fetcher = fetcher
        self.notify = notify
        self.max_attempts = max_attempts
        self.strict_feedback = strict_feedback

        self._lock = threading.RLock()
        self._phase = Phase.AWAITING_WORD
        self.feedback_text = ""
        self.result_text = ""
        self.attempts_text = self._attempts_label()

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def attempts(self) -> int:
        return self.state.attempts

    def _attempts_label(self) -> str:
        return f"Attempts: {self.state.attempts}"

    # ---- lifecycle ----

    def start(self) -> None:
        """Restore the saved attempt count and request the first word."""
        with self._lock:
            self.state.load()
            self.attempts_text = self._attempts_label()
            self._request_word()

    def new_game(self) -> None:
        """Abandon the current round and start over with a fresh word."""
        with self._lock:
            logger.info("new game requested")
            self.state.end_round()
            self.state.save(reset=True)
            self.attempts_text = self._attempts_label()
            self.feedback_text = ""
            self.result_text = ""
            self._request_word()

    def close(self) -> None:
        self.fetcher.close()

    # ---- word fetching ----

    def _request_word(self) -> None:
        self._phase = Phase.AWAITING_WORD
        self.fetcher.fetch(self._on_word)

    def _on_word(self, generation: int, word: Optional[str],
                 error: Optional[WordFetchError]) -> None:
        with self._lock:
            if not self.fetcher.is_current(generation):
                logger.info("ignoring word from superseded fetch #%d", generation)
                return
            if error is not None:
                logger.warning("word fetch failed: %s", error)
                self.notify(error.user_message)
                return
            self.state.begin_round(word)
            self._phase = Phase.AWAITING_GUESS
            self.attempts_text = self._attempts_label()
            logger.info("round ready (attempts=%d)", self.state.attempts)
            logger.debug("target word is %r", word)

    # ---- guessing ----

    def submit_guess(self, raw: str) -> GuessResult:
        with self._lock:
            try:
                if self._phase is not Phase.AWAITING_GUESS or not self.state.has_target:
                    raise TargetNotReadyError()
                guess = normalize_guess(raw, self.state.word_length)
            except GuessError as e:
                logger.debug("rejected guess %r: %s", raw, e)
                self.notify(e.user_message)
                return GuessResult(accepted=False, attempts=self.state.attempts,
                                   message=e.user_message)
            return self._evaluate(guess)

    def _evaluate(self, guess: str) -> GuessResult:
        target = self.state.target_word
        attempts = self.state.increment()
        self.attempts_text = self._attempts_label()

        symbols = evaluate(guess, target, count_letters=self.strict_feedback)
        self.feedback_text = format_feedback(symbols)

        if is_solved(symbols, target):
            outcome = RoundOutcome.WON
            self.result_text = "You guessed it!"
        elif attempts >= self.max_attempts:
            outcome = RoundOutcome.LOST
            self.result_text = f"Game over! The word was: {target}"
        else:
            self.state.save(reset=False)
            logger.info("guess %d/%d missed", attempts, self.max_attempts)
            return GuessResult(accepted=True, guess=guess, feedback=symbols,
                               outcome=RoundOutcome.IN_PROGRESS, attempts=attempts)

        logger.info("round %s after %d attempt(s)", outcome.value, attempts)
        self._finish_round()
        return GuessResult(accepted=True, guess=guess, feedback=symbols, outcome=outcome,
                           attempts=attempts, answer=target)

    def _finish_round(self) -> None:
        self._phase = Phase.ROUND_OVER
        self.state.end_round()
        self.state.save(reset=True)
        self._request_word()
