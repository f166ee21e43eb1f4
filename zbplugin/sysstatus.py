"""Machine health report and the packed default rate-limit setting."""

from __future__ import annotations

import math

import psutil

MINUTE_UNIT = "分钟"


def _round(value: float) -> float:
    """Round half away from zero."""
    return float(math.floor(value + 0.5) if value >= 0 else math.ceil(value - 0.5))


def _fmt(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def cpu_percent() -> float:
    """CPU usage over one second, rounded; -1 when unavailable."""
    try:
        return _round(psutil.cpu_percent(interval=1))
    except (OSError, psutil.Error):
        return -1.0


def mem_percent() -> float:
    """Memory usage, rounded; -1 when unavailable."""
    try:
        return _round(psutil.virtual_memory().percent)
    except (OSError, psutil.Error):
        return -1.0


def disk_report() -> str:
    """One line per used partition: mount point, size in MiB and usage."""
    try:
        partitions = psutil.disk_partitions(all=True)
    except (OSError, psutil.Error) as err:
        return str(err)
    lines = []
    for part in partitions:
        try:
            usage = psutil.disk_usage(part.mountpoint)
        except (OSError, psutil.Error) as err:
            lines.append(f"\n  - {err}")
            continue
        pc = int(_round(usage.percent))
        if pc > 0:
            lines.append(f"\n  - {part.mountpoint}({usage.total // 1024 // 1024}M) {pc}%")
    return "".join(lines)


def status_report() -> str:
    """The full self-check message."""
    return (
        f"* CPU占用: {_fmt(cpu_percent())}%\n"
        f"* RAM占用: {_fmt(mem_percent())}%\n"
        f"* 硬盘使用: {disk_report()}"
    )


def encode_limit(interval: int, burst: int) -> int:
    """Pack an interval in seconds and a burst into one stored integer."""
    return (interval & 0xFFFF) | ((burst << 16) & 0xFFFF0000)


def decode_limit(data: int) -> tuple[int, int]:
    """Unpack ``(interval_seconds, burst)`` from a stored integer."""
    return data & 0xFFFF, (data >> 16) & 0xFFFF


def parse_limit(number: str | int, unit: str, burst: str | int) -> tuple[int, int]:
    """Validate a limit command; return ``(interval_seconds, burst)``."""
    interval = int(number)
    if unit == MINUTE_UNIT:
        interval *= 60
    if not 0 < interval < 65536:
        raise ValueError("interval too big")
    count = int(burst)
    if not 0 < count < 65536:
        raise ValueError("burst too big")
    return interval, count