"""Acrostic and telestich poems fetched from a poetry site."""

from __future__ import annotations

import re

import lxml.html
import requests

LOGIN_URL = "https://www.shicimingju.com/cangtoushi/"
SEARCH_URL = "https://www.shicimingju.com/cangtoushi/index.html"
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/96.0.4664.110 Safari/537.36"
)
REFERER = "https://www.shicimingju.com/cangtoushi/index.html"

LINE_LENGTH = "7"
HEAD = "0"
TAIL = "2"

_KEYWORD = re.compile("[一-龥]{3,10}")


def _parse(html: str):
    return lxml.html.document_fromstring(html or "<html></html>")


def extract_csrf(html: str) -> str:
    """The value of the ``_csrf`` input on a page."""
    values = _parse(html).xpath("//input[@name='_csrf']/@value")
    if not values:
        raise ValueError("csrf token not found")
    return str(values[0])


def extract_poem(html: str) -> str:
    """The poem text of a result page, without spaces or the leading line break."""
    nodes = _parse(html).xpath("//div[@class='card']/div[@class='card']")
    if not nodes:
        raise ValueError("poem not found")
    text = "".join(nodes[0].itertext()).replace(" ", "")
    return text.replace("\n", "", 1)


class PoemClient:
    """A session with the poem generator."""

    def __init__(self, session: requests.Session | None = None) -> None:
        self.session = session if session is not None else requests.Session()
        self.csrf = ""

    def login(self) -> None:
        """Start a fresh session and pick up its csrf token."""
        self.session.cookies.clear()
        response = self.session.get(LOGIN_URL, headers={"User-Agent": USER_AGENT})
        response.raise_for_status()
        self.csrf = extract_csrf(response.text)

    def search(self, keyword: str, length: str, position: str) -> str:
        """The result page for ``keyword`` hidden at ``position`` of each line."""
        response = self.session.post(
            SEARCH_URL,
            data={"_csrf": self.csrf, "kw": keyword, "zishu": length, "position": position},
            headers={
                "Referer": REFERER,
                "User-Agent": USER_AGENT,
                "Content-Type": "application/x-www-form-urlencoded",
            },
        )
        response.raise_for_status()
        return response.text

    def _poem(self, keyword: str, position: str) -> str:
        if not _KEYWORD.fullmatch(keyword):
            raise ValueError("keyword must be 3 to 10 Chinese characters")
        self.login()
        return extract_poem(self.search(keyword, LINE_LENGTH, position))

    def acrostic(self, keyword: str) -> str:
        """A poem whose lines begin with the characters of ``keyword``."""
        return self._poem(keyword, HEAD)

    def telestich(self, keyword: str) -> str:
        """A poem whose lines end with the characters of ``keyword``."""
        return self._poem(keyword, TAIL)