"""Pick one of several options for the undecided."""

from __future__ import annotations

import random

SEPARATOR = "还是"


def split_options(args: str) -> list[str]:
    """The options in ``args``, separated by ``还是``."""
    return args.split(SEPARATOR)


def choose(args: str, nickname: str, rng: random.Random | None = None) -> str:
    """The reply listing the options and the one picked at random."""
    rng = rng if rng is not None else random.Random()
    options = split_options(args)
    numbered = "\n".join(f"{n}, {option}" for n, option in enumerate(options, start=1))
    result = rng.choice(options)
    return f"> {nickname}\n你的选项有:\n{numbered}\n你最终会选: {result}"