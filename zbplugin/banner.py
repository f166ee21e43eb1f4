"""Version banner and the generator that records the build's version."""

from __future__ import annotations

import subprocess
from datetime import datetime
from pathlib import Path

VERSION = "v1.6.1"
BUILT = "2023-01-13 00:49:39 +0800 CST"

_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
_TIME_SUFFIX = " +0800 CST"


def make_banner(version: str = VERSION, built: str = BUILT) -> str:
    """The banner text shown at start-up and on help."""
    return f"* OneBot + ZeroBot + Python\n* Version {version} - {built}"


BANNER = make_banner(VERSION, BUILT)


def _format_time(now: datetime) -> str:
    return now.strftime(_TIME_FORMAT) + _TIME_SUFFIX


def latest_tag(git_output: str) -> str:
    """The last tag listed in newline-terminated ``git tag`` output."""
    lines = git_output.split("\n")
    if len(lines) < 2:
        raise ValueError("no git tag found")
    return lines[-2]


def render_module(version: str, now: datetime) -> str:
    """Source text of a module holding the version and build time."""
    return (
        '"""Build information."""\n'
        "\n"
        f"VERSION = {version!r}\n"
        f"BUILT = {_format_time(now)!r}\n"
    )


def generate(path: str | Path, now: datetime | None = None) -> str:
    """Write build information for the newest git tag to ``path``; return the tag."""
    when = now if now is not None else datetime.now()
    result = subprocess.run(
        ["git", "tag", "--sort=committerdate"],
        capture_output=True,
        text=True,
        check=True,
    )
    version = latest_tag(result.stdout)
    Path(path).write_text(render_module(version, when), encoding="utf-8")
    return version