"""Per-group forbidden words and the record of bans they caused."""

from __future__ import annotations

import sqlite3
import threading
import time
from pathlib import Path

BAN_DURATION = 600
BAN_TABLE = "__bantime__"
NO_WORDS = "本群还没有违禁词~"

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_STRIPPED = str.maketrans("", "", "\n\r\t;")


def normalize_message(text: str) -> str:
    """The message with line breaks, tabs and semicolons removed."""
    return text.translate(_STRIPPED)


def group_table(group_id: int) -> str:
    """The table name of a group: its id in base 36."""
    n = abs(int(group_id))
    digits = []
    while True:
        n, r = divmod(n, 36)
        digits.append(_DIGITS[r])
        if not n:
            break
    name = "".join(reversed(digits))
    return "-" + name if group_id < 0 else name


def _quote(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


class AntiAbuseDB:
    """SQLite store of forbidden words per group and of active bans."""

    def __init__(self, path: str | Path) -> None:
        self._conn = sqlite3.connect(str(path), check_same_thread=False)
        self._lock = threading.RLock()

    def __enter__(self) -> AntiAbuseDB:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        with self._lock:
            self._conn.close()

    def _exists(self, table: str) -> bool:
        row = self._conn.execute(
            "SELECT 1 FROM sqlite_master WHERE type='table' AND name=?", (table,)
        ).fetchone()
        return row is not None

    def is_forbidden(self, group_id: int, message: str) -> bool:
        """Whether ``message`` contains any of the group's forbidden words."""
        table = group_table(group_id)
        with self._lock:
            if not self._exists(table):
                return False
            row = self._conn.execute(
                f"SELECT 1 FROM {_quote(table)} WHERE instr(?, word) > 0 LIMIT 1", (message,)
            ).fetchone()
            return row is not None

    def add_word(self, group_id: int, word: str) -> None:
        table = _quote(group_table(group_id))
        with self._lock, self._conn:
            self._conn.execute(
                f"CREATE TABLE IF NOT EXISTS {table} (word TEXT PRIMARY KEY NOT NULL)"
            )
            self._conn.execute(f"REPLACE INTO {table} (word) VALUES (?)", (word,))

    def delete_word(self, group_id: int, word: str) -> None:
        """Remove a word; raises ValueError when the group has no words."""
        table = group_table(group_id)
        with self._lock, self._conn:
            count = 0
            if self._exists(table):
                count = self._conn.execute(f"SELECT COUNT(*) FROM {_quote(table)}").fetchone()[0]
            if count == 0:
                raise ValueError(NO_WORDS)
            self._conn.execute(f"DELETE FROM {_quote(table)} WHERE word=?", (word,))

    def list_words(self, group_id: int) -> str:
        """The group's words as ``[a | b]``; ``[]`` when there is little or nothing."""
        table = group_table(group_id)
        with self._lock:
            words: list[str] = []
            if self._exists(table):
                words = [
                    row[0]
                    for row in self._conn.execute(f"SELECT word FROM {_quote(table)} ORDER BY rowid")
                ]
        listing = "[" + " | ".join(words)
        if len(listing.encode("utf-8")) <= 4:
            return "[]"
        return listing + "]"

    def _create_ban_table(self) -> None:
        self._conn.execute(
            f"CREATE TABLE IF NOT EXISTS {_quote(BAN_TABLE)} "
            "(id INTEGER PRIMARY KEY NOT NULL, time INTEGER)"
        )

    def record_ban(self, user_id: int, timestamp: int | None = None) -> None:
        """Remember that ``user_id`` was banned at ``timestamp`` (Unix seconds)."""
        when = int(time.time()) if timestamp is None else int(timestamp)
        with self._lock, self._conn:
            self._create_ban_table()
            self._conn.execute(
                f"REPLACE INTO {_quote(BAN_TABLE)} (id, time) VALUES (?, ?)", (user_id, when)
            )

    def expire_bans(self, now: int | None = None) -> list[int]:
        """Drop bans with less than a minute left; return the users to unblock."""
        current = int(time.time()) if now is None else int(now)
        with self._lock, self._conn:
            if not self._exists(BAN_TABLE):
                return []
            rows = self._conn.execute(
                f"SELECT id, time FROM {_quote(BAN_TABLE)} ORDER BY rowid"
            ).fetchall()
            expired = [uid for uid, t in rows if t + BAN_DURATION - current < 60]
            self._conn.execute(
                f"DELETE FROM {_quote(BAN_TABLE)} WHERE time <= ?",
                (current + 60 - BAN_DURATION,),
            )
            return expired