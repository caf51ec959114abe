"""
Key-value preferences persisted as a single JSON file.

Layout on disk:
    {"gameState": {"attempts": 3}}

Each top-level key is a named namespace holding flat key/value pairs.
Writes rewrite the whole file through a temporary sibling so a crash
never leaves half a document behind. There is no schema versioning.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)


class PreferencesStore:
    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _read(self) -> Dict[str, Dict[str, Any]]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("ignoring unreadable preferences file %s: %s", self.path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: Dict[str, Dict[str, Any]]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        with tmp.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        os.replace(tmp, self.path)

    def namespace(self, name: str) -> Dict[str, Any]:
        """Snapshot of one namespace (empty if absent)."""
        ns = self._read().get(name)
        return dict(ns) if isinstance(ns, dict) else {}

    def get_int(self, name: str, key: str, default: int = 0) -> int:
        value = self.namespace(name).get(key, default)
        if isinstance(value, bool) or not isinstance(value, int):
            logger.warning("%s.%s is not an integer (%r); using %d", name, key, value, default)
            return default
        return value

    def put_int(self, name: str, key: str, value: int) -> None:
        data = self._read()
        ns = data.get(name)
        if not isinstance(ns, dict):
            ns = {}
        ns[key] = int(value)
        data[name] = ns
        self._write(data)
