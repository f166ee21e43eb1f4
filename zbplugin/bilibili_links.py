"""Recognise bilibili links in chat messages."""

from __future__ import annotations

import enum
import re


class LinkKind(enum.Enum):
    """What a bilibili link points to."""

    VIDEO = "video"
    DYNAMIC = "dynamic"
    ARTICLE = "article"
    LIVE = "live"


SHORT_LINK = re.compile(r"((b23|acg).tv|bili2233.cn)/[0-9a-zA-Z]+")
VIDEO = re.compile(r"bilibili.com\\?/video\\?/(?:av(\d+)|([bB][vV][0-9a-zA-Z]+))")
DYNAMIC = re.compile(r"(t.bilibili.com|m.bilibili.com\\?/dynamic)\\?/(\d+)")
ARTICLE = re.compile(r"bilibili.com\\?/read\\?/(?:cv|mobile\\?/)(\d+)")
LIVE_ROOM = re.compile(r"live.bilibili.com\\?/(\d+)")


def find_short_link(text: str) -> str | None:
    """The first short link in ``text``, without scheme, or None."""
    m = SHORT_LINK.search(text)
    return m.group(0) if m else None


def match_link(url: str) -> tuple[LinkKind, str] | None:
    """The kind of link in ``url`` and the id it carries, or None."""
    m = VIDEO.search(url)
    if m:
        return LinkKind.VIDEO, m.group(1) or m.group(2)
    m = DYNAMIC.search(url)
    if m:
        return LinkKind.DYNAMIC, m.group(2)
    m = ARTICLE.search(url)
    if m:
        return LinkKind.ARTICLE, m.group(1)
    m = LIVE_ROOM.search(url)
    if m:
        return LinkKind.LIVE, m.group(1)
    return None