"""Break up a run of repeated messages in a group."""

from __future__ import annotations

import random
from dataclasses import dataclass

DEFAULT_THROTTLE = 3


@dataclass
class _Run:
    count: int
    raw: str


class RepeatBreaker:
    """Counts identical consecutive messages per group and interrupts long runs."""

    def __init__(self, throttle: int = DEFAULT_THROTTLE, rng: random.Random | None = None) -> None:
        if not 0 <= throttle <= 9:
            raise ValueError("throttle must be between 0 and 9")
        self.throttle = throttle
        self._rng = rng if rng is not None else random.Random()
        self._runs: dict[int, _Run] = {}

    def feed(self, group_id: int, raw: str) -> str | None:
        """Record a message; return the text to send when the run is broken."""
        run = self._runs.get(group_id)
        if run is None or not raw or run.raw != raw:
            self._runs[group_id] = _Run(0, raw)
            return None
        if run.count < self.throttle:
            run.count += 1
            return None
        del self._runs[group_id]
        if len(raw.encode("utf-8")) > 2:
            chars = list(raw)
            self._rng.shuffle(chars)
            return "".join(chars)
        return f"{run.count}: {raw}"