"""Curses to answer the rude with."""

from __future__ import annotations

import sqlite3
from pathlib import Path

MIN_LEVEL = "min"
MAX_LEVEL = "max"

TRIGGER_WORDS = (
    "他妈", "公交车", "你妈", "操", "屎", "去死", "快死", "我日", "逼",
    "尼玛", "艾滋", "癌症", "有病", "烦你", "你爹", "屮", "cnm",
)


class Curses:
    """Curses grouped by level."""

    def __init__(self, path: str | Path) -> None:
        self._conn = sqlite3.connect(str(path))
        with self._conn:
            self._conn.execute(
                "CREATE TABLE IF NOT EXISTS curse (id INTEGER PRIMARY KEY, text TEXT, level TEXT)"
            )

    def __enter__(self) -> Curses:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        self._conn.close()

    def random(self, level: str) -> str:
        """A random curse of ``level``; empty when there is none."""
        row = self._conn.execute(
            "SELECT text FROM curse WHERE level = ? ORDER BY RANDOM() LIMIT 1", (level,)
        ).fetchone()
        return row[0] if row else ""