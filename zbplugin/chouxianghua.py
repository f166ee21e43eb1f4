"""Rewrite Chinese text as emoji that sound alike."""

from __future__ import annotations

import sqlite3
from pathlib import Path


class Abstractifier:
    """Replaces characters and character pairs with homophonous emoji."""

    def __init__(self, path: str | Path) -> None:
        self._conn = sqlite3.connect(str(path))
        with self._conn:
            self._conn.execute(
                "CREATE TABLE IF NOT EXISTS pinyin (word TEXT PRIMARY KEY, pronunciation TEXT)"
            )
            self._conn.execute(
                "CREATE TABLE IF NOT EXISTS emoji (pronunciation TEXT PRIMARY KEY, emoji TEXT)"
            )

    def __enter__(self) -> Abstractifier:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        self._conn.close()

    def pinyin(self, word: str) -> str:
        """The pronunciation of ``word``; empty if unknown."""
        row = self._conn.execute(
            "SELECT pronunciation FROM pinyin WHERE word = ? LIMIT 1", (word,)
        ).fetchone()
        return row[0] if row else ""

    def emoji(self, pronunciation: str) -> str:
        """The emoji pronounced ``pronunciation``; empty if none."""
        row = self._conn.execute(
            "SELECT emoji FROM emoji WHERE pronunciation = ? LIMIT 1", (pronunciation,)
        ).fetchone()
        return row[0] if row else ""

    def translate(self, text: str) -> str:
        """The text with pairs, then single characters, replaced where an emoji fits."""
        out: list[str] = []
        i = 0
        while i < len(text):
            if i < len(text) - 1:
                pair = self.emoji(self.pinyin(text[i]) + self.pinyin(text[i + 1]))
                if pair:
                    out.append(pair)
                    i += 2
                    continue
            single = self.emoji(self.pinyin(text[i]))
            out.append(single or text[i])
            i += 1
        return "".join(out)