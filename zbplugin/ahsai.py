"""Speaker selection and command parsing for free-text speech synthesis."""

from __future__ import annotations

import bisect
import re
import unicodedata

SPEAKERS: tuple[str, ...] = tuple(
    sorted(
        [
            "伊織弓鶴", "紲星あかり", "結月ゆかり", "京町セイカ", "東北きりたん", "東北イタコ",
            "ついなちゃん標準語", "ついなちゃん関西弁", "音街ウナ", "琴葉茜", "吉田くん", "民安ともえ",
            "桜乃そら", "月読アイ", "琴葉葵", "東北ずん子", "月読ショウタ", "水奈瀬コウ",
        ]
    )
)

_PREFIX = "使"
_SEPARATOR = "说"
_MAX_NAME = 10
_TEXT_CHAR = re.compile(
    "[A-Za-z0-9\t\n\f\r \u3005\u3040-\u30ff\u4e00-\u9fff"
    "\uff11-\uff19\uff21-\uff3a\uff41-\uff5a\uff66-\uff9d]"
)
_INTEGER = re.compile(r"[+-]?\d+")


def _allowed(ch: str) -> bool:
    return bool(_TEXT_CHAR.fullmatch(ch)) or unicodedata.category(ch).startswith("P")


def parse_command(message: str) -> tuple[str, str] | None:
    """Split ``使<name>说<text>`` into ``(name, text)``; None if it does not match."""
    if not message.startswith(_PREFIX):
        return None
    body = message[len(_PREFIX):]
    limit = min(_MAX_NAME, len(body) - 1)
    for split in range(limit, -1, -1):
        if body[split] != _SEPARATOR:
            continue
        name, text = body[:split], body[split + 1:]
        if "\n" in name or not text:
            continue
        if all(_allowed(ch) for ch in text):
            return name, text
    return None


def find_speaker(name: str) -> str | None:
    """The speaker called ``name``, or None if there is none."""
    index = bisect.bisect_left(SPEAKERS, name)
    if index < len(SPEAKERS) and SPEAKERS[index] == name:
        return name
    return None


def speaker_menu() -> str:
    """The prompt listing speakers by number."""
    listing = "".join(f"{i}. {name}\n" for i, name in enumerate(SPEAKERS))
    return "输入的音源为空, 请输入音源序号\n" + listing


def pick_by_index(text: str) -> str:
    """The speaker for a number typed in reply; non-numbers count as 0."""
    num = int(text) if _INTEGER.fullmatch(text) else 0
    if not 0 <= num < len(SPEAKERS):
        raise ValueError("序号非法!")
    return SPEAKERS[num]