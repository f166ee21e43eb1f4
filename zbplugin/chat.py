"""Basic chat reactions: name calls, pokes and the group air conditioner."""

from __future__ import annotations

import random
import time
from typing import Callable

DEFAULT_TEMPERATURE = 26
POKE_INTERVAL = 300.0
POKE_BURST = 8


class AirConditioner:
    """A pretend air conditioner per group."""

    def __init__(self) -> None:
        self._temperature: dict[int, int] = {}
        self._on: dict[int, bool] = {}

    def turn_on(self, group_id: int) -> str:
        self._on[group_id] = True
        return "❄️哔~"

    def turn_off(self, group_id: int) -> str:
        self._on[group_id] = False
        self._temperature.pop(group_id, None)
        return "💤哔~"

    def set_temperature(self, group_id: int, temperature: int) -> str:
        """Set the temperature if the conditioner is on; return the status."""
        self._temperature.setdefault(group_id, DEFAULT_TEMPERATURE)
        if self._on.get(group_id, False):
            self._temperature[group_id] = int(temperature)
        return self._report(group_id)

    def status(self, group_id: int) -> str:
        self._temperature.setdefault(group_id, DEFAULT_TEMPERATURE)
        return self._report(group_id)

    def _report(self, group_id: int) -> str:
        head = "❄️风速中" if self._on.get(group_id, False) else "💤"
        return f"{head}\n群温度 {self._temperature[group_id]}℃"


class TokenBucket:
    """Holds up to ``burst`` tokens, refilled at ``burst`` per ``interval`` seconds."""

    def __init__(
        self,
        interval: float = POKE_INTERVAL,
        burst: int = POKE_BURST,
        clock: Callable[[], float] | None = None,
    ) -> None:
        if interval <= 0 or burst <= 0:
            raise ValueError("interval and burst must be positive")
        self._clock = clock if clock is not None else time.monotonic
        self._capacity = float(burst)
        self._rate = burst / interval
        self._tokens = float(burst)
        self._last = self._clock()

    def acquire(self, n: int = 1) -> bool:
        """Take ``n`` tokens if that many are available."""
        now = self._clock()
        self._tokens = min(self._capacity, self._tokens + (now - self._last) * self._rate)
        self._last = now
        if n <= self._tokens:
            self._tokens -= n
            return True
        return False


class PokeResponder:
    """Replies to pokes, going quiet when poked too often."""

    def __init__(self, nickname: str, clock: Callable[[], float] | None = None) -> None:
        self.nickname = nickname
        self._clock = clock
        self._buckets: dict[int, TokenBucket] = {}

    def respond(self, group_id: int) -> str | None:
        bucket = self._buckets.get(group_id)
        if bucket is None:
            bucket = self._buckets[group_id] = TokenBucket(clock=self._clock)
        if bucket.acquire(3):
            return f"请不要戳{self.nickname} >_<"
        if bucket.acquire(1):
            return f"喂(#`O′) 戳{self.nickname}干嘛！"
        return None


def name_call_reply(nickname: str, rng: random.Random | None = None) -> str:
    """A random answer to being called by name."""
    rng = rng if rng is not None else random.Random()
    return rng.choice(
        [
            nickname + "在此，有何贵干~",
            "(っ●ω●)っ在~",
            "这里是" + nickname + "(っ●ω●)っ",
            nickname + "不在呢~",
        ]
    )