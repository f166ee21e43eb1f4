"""SQLite stores of push subscriptions, uploader names and known vups."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Mapping


@dataclass(frozen=True)
class Push:
    """One subscription of a group to an uploader."""

    id: int
    bilibili_uid: int
    group_id: int
    live_disable: int
    dynamic_disable: int


@dataclass(frozen=True)
class Vup:
    """A known virtual uploader."""

    mid: int
    uname: str
    roomid: int


class PushStore:
    """Subscriptions of groups to uploaders' dynamics and live streams."""

    def __init__(self, path: str | Path) -> None:
        self._conn = sqlite3.connect(str(path))
        with self._conn:
            self._conn.execute(
                "CREATE TABLE IF NOT EXISTS bilibili_push ("
                "id INTEGER PRIMARY KEY, "
                "bilibili_uid INTEGER, "
                "group_id INTEGER, "
                "live_disable INTEGER DEFAULT 0, "
                "dynamic_disable INTEGER DEFAULT 0)"
            )
            self._conn.execute(
                "CREATE INDEX IF NOT EXISTS idx_buid_gid ON bilibili_push (bilibili_uid, group_id)"
            )
            self._conn.execute(
                "CREATE TABLE IF NOT EXISTS bilibili_up ("
                "bilibili_uid INTEGER PRIMARY KEY, name TEXT)"
            )

    def __enter__(self) -> PushStore:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        self._conn.close()

    def upsert(
        self,
        buid: int,
        group_id: int,
        live_disable: int | None = None,
        dynamic_disable: int | None = None,
    ) -> None:
        """Create the subscription or change only the flags that are given."""
        with self._conn:
            row = self._conn.execute(
                "SELECT id FROM bilibili_push WHERE bilibili_uid = ? AND group_id = ? "
                "ORDER BY id LIMIT 1",
                (buid, group_id),
            ).fetchone()
            if row is None:
                self._conn.execute(
                    "INSERT INTO bilibili_push "
                    "(bilibili_uid, group_id, live_disable, dynamic_disable) VALUES (?, ?, ?, ?)",
                    (buid, group_id, live_disable or 0, dynamic_disable or 0),
                )
                return
            changes = {
                column: value
                for column, value in (
                    ("live_disable", live_disable),
                    ("dynamic_disable", dynamic_disable),
                )
                if value is not None
            }
            if not changes:
                return
            assignments = ", ".join(f"{column} = ?" for column in changes)
            self._conn.execute(
                f"UPDATE bilibili_push SET {assignments} WHERE bilibili_uid = ? AND group_id = ?",
                (*changes.values(), buid, group_id),
            )

    def subscribe(self, buid: int, group_id: int) -> None:
        self.upsert(buid, group_id, live_disable=0, dynamic_disable=0)

    def unsubscribe(self, buid: int, group_id: int) -> None:
        self.upsert(buid, group_id, live_disable=1, dynamic_disable=1)

    def unsubscribe_dynamic(self, buid: int, group_id: int) -> None:
        self.upsert(buid, group_id, dynamic_disable=1)

    def unsubscribe_live(self, buid: int, group_id: int) -> None:
        self.upsert(buid, group_id, live_disable=1)

    def _distinct_uids(self, column: str) -> list[int]:
        seen: dict[int, None] = {}
        for (uid,) in self._conn.execute(
            f"SELECT bilibili_uid FROM bilibili_push WHERE {column} = 0 ORDER BY id"
        ):
            seen.setdefault(uid, None)
        return list(seen)

    def live_uids(self) -> list[int]:
        """Uploaders whose live streams someone follows, each once."""
        return self._distinct_uids("live_disable")

    def dynamic_uids(self) -> list[int]:
        """Uploaders whose dynamics someone follows, each once."""
        return self._distinct_uids("dynamic_disable")

    def _groups(self, buid: int, column: str) -> list[int]:
        return [
            gid
            for (gid,) in self._conn.execute(
                f"SELECT group_id FROM bilibili_push WHERE bilibili_uid = ? AND {column} = 0 "
                "ORDER BY id",
                (buid,),
            )
        ]

    def groups_for_live(self, buid: int) -> list[int]:
        return self._groups(buid, "live_disable")

    def groups_for_dynamic(self, buid: int) -> list[int]:
        return self._groups(buid, "dynamic_disable")

    def pushes_for_group(self, group_id: int) -> list[Push]:
        """The group's subscriptions that still push something."""
        rows = self._conn.execute(
            "SELECT id, bilibili_uid, group_id, live_disable, dynamic_disable FROM bilibili_push "
            "WHERE group_id = ? AND (live_disable = 0 OR dynamic_disable = 0) ORDER BY id",
            (group_id,),
        )
        return [Push(*row) for row in rows]

    def add_up(self, buid: int, name: str) -> None:
        """Remember an uploader's name; an existing entry is kept."""
        with self._conn:
            self._conn.execute(
                "INSERT OR IGNORE INTO bilibili_up (bilibili_uid, name) VALUES (?, ?)",
                (buid, name),
            )

    def up_names(self) -> dict[int, str]:
        return dict(self._conn.execute("SELECT bilibili_uid, name FROM bilibili_up"))


class VupStore:
    """The list of known virtual uploaders."""

    def __init__(self, path: str | Path) -> None:
        self._conn = sqlite3.connect(str(path))
        with self._conn:
            self._conn.execute(
                "CREATE TABLE IF NOT EXISTS vup (mid INTEGER PRIMARY KEY, uname TEXT, roomid INTEGER)"
            )

    def __enter__(self) -> VupStore:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        self._conn.close()

    def insert(self, mid: int, uname: str, roomid: int) -> None:
        """Add a vup unless one with that id is already known."""
        with self._conn:
            self._conn.execute(
                "INSERT OR IGNORE INTO vup (mid, uname, roomid) VALUES (?, ?, ?)",
                (mid, uname, roomid),
            )

    def filter(self, ids: Iterable[int]) -> list[Vup]:
        """The known vups among ``ids``."""
        wanted = list(ids)
        if not wanted:
            return []
        marks = ", ".join("?" for _ in wanted)
        rows = self._conn.execute(
            f"SELECT mid, uname, roomid FROM vup WHERE mid IN ({marks}) ORDER BY mid", wanted
        )
        return [Vup(*row) for row in rows]

    def update_from(self, entries: Iterable[Mapping[str, Any]]) -> int:
        """Insert every entry with ``mid``, ``uname`` and ``roomid``; return how many were read."""
        count = 0
        for entry in entries:
            self.insert(int(entry["mid"]), str(entry.get("uname", "")), int(entry.get("roomid", 0)))
            count += 1
        return count