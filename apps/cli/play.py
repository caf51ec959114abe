# apps/cli/play.py
"""
Terminal front end for wordscramble.

This script:
  1) Loads settings from the environment (and .env), then applies CLI flags.
  2) Builds the word source (remote API or a local word list), the saved
     game state and the controller.
  3) Reads guesses until EOF or :quit, printing feedback, attempt count and
     round results. `:new` abandons the round and fetches another word.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from wordscramble.config import Settings
from wordscramble.errors import WordScrambleError
from wordscramble.game import GameController, Phase
from wordscramble.source import WordFetcher, create_source, describe_sources
from wordscramble.state import GameState, PreferencesStore

PROMPT = "guess> "
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _toast(message: str) -> None:
    print(f"[!] {message}", flush=True)


def build_controller(settings: Settings, *, source_id: str = "http",
                     wordlist: str | None = None, seed: int | None = None,
                     notify=_toast) -> GameController:
    """
    Wire a controller from settings. `wordlist` is required for the file source.
    """
    kwargs = {}
    if source_id == "file":
        if not wordlist:
            raise ValueError("--wordlist is required with --source file")
        kwargs = {"path": wordlist, "seed": seed}
    source = create_source(source_id, settings, **kwargs)

    state = GameState(PreferencesStore(settings.state_path), word_length=settings.word_length)
    return GameController(
        state,
        WordFetcher(source),
        notify=notify,
        max_attempts=settings.max_attempts,
        strict_feedback=settings.strict_feedback,
    )


def _wait_for_word(controller: GameController, timeout: float) -> None:
    """Block briefly so the first prompt usually already has a word."""
    deadline = time.monotonic() + timeout
    while controller.phase is Phase.AWAITING_WORD and time.monotonic() < deadline:
        time.sleep(0.05)


def play(controller: GameController, *, stdin=sys.stdin, wait: float = 5.0) -> None:
    controller.start()
    _wait_for_word(controller, wait)
    print(controller.attempts_text)

    while True:
        print(PROMPT, end="", flush=True)
        line = stdin.readline()
        if not line:
            print()
            break
        line = line.strip()

        if line == ":quit":
            break
        if line == ":new":
            controller.new_game()
            _wait_for_word(controller, wait)
            print(controller.attempts_text)
            continue

        result = controller.submit_guess(line)
        if not result.accepted:
            continue

        print(controller.feedback_text)
        print(controller.attempts_text)
        if result.answer is not None:
            print(controller.result_text)
            _wait_for_word(controller, wait)


def main(argv: list[str] | None = None) -> int:
    """
    Parse CLI args, build the game and run the input loop.
    """
    source_choices = ", ".join(describe_sources())

    ap = argparse.ArgumentParser(description="wordscramble: guess the 4-letter word")
    ap.add_argument("--source", default="http",
                    help=f"word source id (one of: {source_choices})")
    ap.add_argument("--wordlist", help="newline-separated 4-letter words (for --source file)")
    ap.add_argument("--seed", type=int, help="RNG seed for the file source")
    ap.add_argument("--state", help="path of the preferences JSON file")
    ap.add_argument("--api", help="base URL of the random word service")
    ap.add_argument("--strict-feedback", action="store_true", default=None,
                    help="count repeated letters when marking '?'")
    ap.add_argument("--log-level", help="DEBUG, INFO, WARNING, ...")
    args = ap.parse_args(argv)

    settings = Settings.from_env().with_overrides(
        state_path=Path(args.state).expanduser() if args.state else None,
        api_base_url=args.api,
        strict_feedback=args.strict_feedback,
        log_level=args.log_level,
    )
    configure_logging(settings.log_level)

    try:
        controller = build_controller(settings, source_id=args.source,
                                      wordlist=args.wordlist, seed=args.seed)
    except (ValueError, WordScrambleError) as e:
        ap.error(str(e))

    try:
        play(controller)
    except KeyboardInterrupt:
        print()
    finally:
        controller.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
