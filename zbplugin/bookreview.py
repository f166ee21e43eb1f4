"""Book reviews kept in an SQLite database."""

from __future__ import annotations

import re
import sqlite3
from pathlib import Path

_KEYWORD = re.compile("[\u4e00-\u9fa5A-Za-z0-9]{1,25}")


class BookReviews:
    """Look up recorded book reviews by keyword or at random."""

    def __init__(self, path: str | Path) -> None:
        self._conn = sqlite3.connect(str(path))
        with self._conn:
            self._conn.execute(
                "CREATE TABLE IF NOT EXISTS bookreview (id INTEGER PRIMARY KEY, bookreview TEXT)"
            )

    def __enter__(self) -> BookReviews:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        self._conn.close()

    def count(self) -> int:
        return self._conn.execute("SELECT COUNT(*) FROM bookreview").fetchone()[0]

    def by_keyword(self, keyword: str) -> str:
        """A review mentioning ``keyword``; empty when none does."""
        if not _KEYWORD.fullmatch(keyword):
            raise ValueError("keyword must be 1 to 25 Chinese characters, letters or digits")
        row = self._conn.execute(
            "SELECT bookreview FROM bookreview WHERE bookreview LIKE ? LIMIT 1",
            (f"%{keyword}%",),
        ).fetchone()
        return row[0] if row else ""

    def random(self) -> str:
        """A random review; empty when there are none."""
        row = self._conn.execute(
            "SELECT bookreview FROM bookreview ORDER BY RANDOM() LIMIT 1"
        ).fetchone()
        return row[0] if row else ""