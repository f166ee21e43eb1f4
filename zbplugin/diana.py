"""A collection of fan essays, stored by a hash of their text."""

from __future__ import annotations

import hashlib
import sqlite3
from pathlib import Path

HENTAI_ID = -3802576048116006195


def essay_id(text: str) -> int:
    """The id of an essay: the first 8 bytes of its MD5, as a signed little-endian integer."""
    digest = hashlib.md5(text.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "little", signed=True)


class Essays:
    """Stored essays."""

    def __init__(self, path: str | Path) -> None:
        self._conn = sqlite3.connect(str(path))
        with self._conn:
            self._conn.execute("CREATE TABLE IF NOT EXISTS text (id INTEGER PRIMARY KEY, data TEXT)")

    def __enter__(self) -> Essays:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        self._conn.close()

    def count(self) -> int:
        return self._conn.execute("SELECT COUNT(*) FROM text").fetchone()[0]

    def add(self, text: str) -> int:
        """Store an essay; return its id."""
        key = essay_id(text)
        with self._conn:
            self._conn.execute("REPLACE INTO text (id, data) VALUES (?, ?)", (key, text))
        return key

    def random(self) -> str:
        """A random essay; raises LookupError when there are none."""
        row = self._conn.execute("SELECT data FROM text ORDER BY RANDOM() LIMIT 1").fetchone()
        if row is None:
            raise LookupError("no essays stored")
        return row[0]

    def hentai(self) -> str:
        """The one essay kept for a bad fit; raises LookupError when missing."""
        row = self._conn.execute("SELECT data FROM text WHERE id = ?", (HENTAI_ID,)).fetchone()
        if row is None:
            raise LookupError("essay not found")
        return row[0]