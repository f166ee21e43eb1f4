"""Short couple stories with the names filled in."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from pathlib import Path

GONG_MARK = "<攻>"
SHOU_MARK = "<受>"
NEED_TWO_NAMES = "请用空格分开两个人名"


@dataclass(frozen=True)
class CpStory:
    """A story and the names it was written with."""

    id: int = 0
    gong: str = ""
    shou: str = ""
    story: str = ""


class CpStories:
    """The collection of stories."""

    def __init__(self, path: str | Path) -> None:
        self._conn = sqlite3.connect(str(path))
        with self._conn:
            self._conn.execute(
                "CREATE TABLE IF NOT EXISTS cp_story "
                "(id INTEGER PRIMARY KEY, gong TEXT, shou TEXT, story TEXT)"
            )

    def __enter__(self) -> CpStories:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        self._conn.close()

    def random(self) -> CpStory:
        """A random story; an empty one when there are none."""
        row = self._conn.execute(
            "SELECT id, gong, shou, story FROM cp_story ORDER BY RANDOM() LIMIT 1"
        ).fetchone()
        return CpStory(*row) if row else CpStory()


def fill_story(story: CpStory, gong: str, shou: str) -> str:
    """The story text with placeholders and original names replaced."""
    text = story.story.replace(GONG_MARK, gong).replace(SHOU_MARK, shou)
    # Both original names take the first name, as the stories have always been told.
    for original in (story.gong, story.shou):
        if original:
            text = text.replace(original, gong)
    return text


def split_names(args: str) -> tuple[str, str]:
    """The two names in ``args``, separated by a space."""
    params = args.split(" ")
    if len(params) < 2:
        raise ValueError(NEED_TWO_NAMES)
    return params[0], params[1]