"""
Word list validator for offline play.

What this module does:
- Validate a newline-separated word list for a given word length N.
- Enforce formatting rules (lowercase, a–z only, exact length N, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict plus the usable words, and provide a
  pretty one-line summary.

Typical use:
    from wordscramble.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist(4, "words_4.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


@dataclass
class WordlistReport:
    """Per-file diagnostics and metadata."""
    N: int
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered
    passed: bool
    issues: List[str] = field(default_factory=list)
    words: List[str] = field(default_factory=list)  # unique valid words, file order


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Blank lines are skipped silently; anything else that is not a
    lowercase a–z token of length N counts as invalid.

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                continue
            if w == w.lower() and w.isascii() and w.isalpha() and len(w) == N:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def validate_wordlist(N: int, path: str | Path) -> Dict:
    """
    Validate a word list for length N.

    Returns
    -------
    Dict
        JSON-serializable WordlistReport. `passed` requires at least one
        valid word; invalid lines and duplicates are reported in `issues`
        but only the valid, de-duplicated words end up in `words`.
    """
    p = Path(path)
    if not p.exists():
        rep = WordlistReport(N, str(path), False, 0, "", 0, 0, False,
                             issues=[f"word list not found: {path}"])
        return asdict(rep)

    words, invalid = _load_and_check(p, N)
    unique = list(dict.fromkeys(words))

    issues: List[str] = []
    if not unique:
        issues.append(f"word list contains 0 valid {N}-letter words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if len(unique) != len(words):
        issues.append("word list contains duplicate lines")

    rep = WordlistReport(
        N=N,
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(unique),
        invalid_lines=invalid,
        passed=bool(unique),
        issues=issues,
        words=unique,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/logs.

    Example:
        N=4 | words=812 (uniq=810, invalid=3, sha=abc123def456) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) | {status}"
    )
