"""Simple link builders: random waifu, payment voice, search link."""

from __future__ import annotations

import random
from urllib.parse import quote_plus

WAIFU_URL = "https://www.thiswaifudoesnotexist.net/example-{}.jpg"
ALIPAY_VOICE_URL = "https://mm.cqu.cc/share/zhifubaodaozhang/mp3/{}.mp3"
BAIDU_URL = "https://buhuibaidu.me/?s="
WAIFU_COUNT = 100000


def waifu_image_url(rng: random.Random | None = None) -> str:
    """A random generated-waifu image URL."""
    rng = rng if rng is not None else random.Random()
    return WAIFU_URL.format(rng.randrange(WAIFU_COUNT) + 1)


def alipay_voice_url(amount: str) -> str:
    """The voice clip announcing a payment of ``amount``."""
    return ALIPAY_VOICE_URL.format(amount.strip())


def baidu_search_url(text: str) -> str:
    """A "let me search that for you" link."""
    if not text:
        raise ValueError("nothing to search for")
    return BAIDU_URL + quote_plus(text)