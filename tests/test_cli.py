import io
from pathlib import Path

import pytest

from apps.cli.play import build_controller, main, play
from wordscramble.config import Settings


def _game(tmp_path: Path, words):
    wordlist = tmp_path / "words.txt"
    wordlist.write_text("\n".join(words) + "\n", encoding="utf-8")
    settings = Settings(state_path=tmp_path / "prefs.json")
    return build_controller(settings, source_id="file", wordlist=str(wordlist), seed=1,
                            notify=lambda m: print(f"[!] {m}"))


def test_play_win(tmp_path: Path, capsys):
    ctl = _game(tmp_path, ["blur"])
    try:
        play(ctl, stdin=io.StringIO("abc\nblue\nblur\n:quit\n"))
    finally:
        ctl.close()
    out = capsys.readouterr().out
    assert "[!] Please enter exactly 4 letters" in out
    assert "Feedback: b l u X " in out
    assert "You guessed it!" in out


def test_play_new_game_and_eof(tmp_path: Path, capsys):
    ctl = _game(tmp_path, ["blur"])
    try:
        play(ctl, stdin=io.StringIO("abcd\n:new\n"))
    finally:
        ctl.close()
    out = capsys.readouterr().out
    assert "Attempts: 1" in out
    assert out.count("Attempts: 0") >= 2
    assert ctl.attempts == 0


def test_file_source_requires_wordlist(tmp_path: Path):
    with pytest.raises(ValueError):
        build_controller(Settings(state_path=tmp_path / "p.json"), source_id="file")


def test_main_rejects_missing_wordlist(tmp_path: Path):
    with pytest.raises(SystemExit):
        main(["--source", "file", "--state", str(tmp_path / "p.json")])


def test_help_lists_source_names(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--help"])
    assert exc.value.code == 0
    out = " ".join(capsys.readouterr().out.split())
    assert "Random Word API" in out and "Word list file" in out
