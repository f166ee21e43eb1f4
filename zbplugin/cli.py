"""Command-line entry: flags, configuration files and start-up banner."""

from __future__ import annotations

import argparse
import json
import logging
import os
import re
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path
from typing import Any, Sequence

from zbplugin.banner import BANNER
from zbplugin.logformat import ColorFormatter

DEFAULT_URL = "ws://127.0.0.1:6700"
DEFAULT_NICKNAME = "智慧的草神"
EXTRA_NICKNAMES = ("ATRI", "atri", "小草神", "アトリ")
DEFAULT_PREFIX = "/"
DEFAULT_LATENCY_MS = 233
DEFAULT_RING_LEN = 4096
DEFAULT_MAX_PROCESS_MIN = 4

_INTEGER = re.compile(r"[+-]?\d+")
_NS_PER_US = 1000

log = logging.getLogger("zbplugin")


@dataclass
class WSClient:
    """A websocket connection the bot dials out to."""

    url: str
    access_token: str = ""


@dataclass
class BotConfig:
    """Bot settings and its connections."""

    nicknames: list[str] = field(default_factory=list)
    command_prefix: str = DEFAULT_PREFIX
    super_users: list[int] = field(default_factory=list)
    ring_len: int = DEFAULT_RING_LEN
    latency: timedelta = timedelta(milliseconds=DEFAULT_LATENCY_MS)
    max_process_time: timedelta = timedelta(minutes=DEFAULT_MAX_PROCESS_MIN)
    clients: list[WSClient] = field(default_factory=list)
    servers: list[dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """The JSON-ready form of the configuration; durations in nanoseconds."""
        return {
            "zero": {
                "nickname": list(self.nicknames),
                "command_prefix": self.command_prefix,
                "super_users": list(self.super_users),
                "ring_len": self.ring_len,
                "latency": _to_ns(self.latency),
                "max_process_time": _to_ns(self.max_process_time),
            },
            "ws": [{"Url": c.url, "AccessToken": c.access_token} for c in self.clients],
            "wss": [dict(s) for s in self.servers],
        }


def _to_ns(delta: timedelta) -> int:
    return (delta // timedelta(microseconds=1)) * _NS_PER_US


def _from_ns(value: int) -> timedelta:
    return timedelta(microseconds=value // _NS_PER_US)


def _config_from_dict(raw: dict[str, Any]) -> BotConfig:
    zero = raw.get("zero") or {}
    return BotConfig(
        nicknames=list(zero.get("nickname") or []),
        command_prefix=zero.get("command_prefix", ""),
        super_users=[int(u) for u in zero.get("super_users") or []],
        ring_len=int(zero.get("ring_len", 0)),
        latency=_from_ns(int(zero.get("latency", 0))),
        max_process_time=_from_ns(int(zero.get("max_process_time", 0))),
        clients=[
            WSClient(url=c.get("Url", ""), access_token=c.get("AccessToken", ""))
            for c in raw.get("ws") or []
        ],
        servers=[dict(s) for s in raw.get("wss") or []],
    )


def load_config(path: str | Path) -> BotConfig:
    """Read a configuration file written by :func:`save_config`."""
    with open(path, encoding="utf-8") as fh:
        return _config_from_dict(json.load(fh))


def save_config(config: BotConfig, path: str | Path) -> None:
    """Write the configuration as one line of JSON."""
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(config.to_dict(), fh, ensure_ascii=False, separators=(",", ":"))
        fh.write("\n")


def _unsigned(value: str) -> int:
    if not value.isdigit():
        raise argparse.ArgumentTypeError(f"invalid unsigned integer: {value!r}")
    return int(value)


def build_parser() -> argparse.ArgumentParser:
    """The command-line parser."""
    parser = argparse.ArgumentParser(prog="zbplugin", add_help=False)
    parser.add_argument("-d", action="store_true", help="Enable debug level log and higher.")
    parser.add_argument("-w", action="store_true", help="Enable warning level log and higher.")
    parser.add_argument("-h", action="store_true", help="Display this help.")
    parser.add_argument("-t", default="", metavar="TOKEN", help="Set AccessToken of WSClient.")
    parser.add_argument("-u", default=DEFAULT_URL, metavar="URL", help="Set Url of WSClient.")
    parser.add_argument("-n", default=DEFAULT_NICKNAME, metavar="NAME", help="Set default nickname.")
    parser.add_argument("-p", default=DEFAULT_PREFIX, metavar="PREFIX", help="Set command prefix.")
    parser.add_argument("-c", default="", metavar="FILE", help="Run from config file.")
    parser.add_argument("-s", default="", metavar="FILE", help="Save default config to file and exit.")
    parser.add_argument("-l", type=_unsigned, default=DEFAULT_LATENCY_MS, metavar="MS",
                        help="Response latency (ms).")
    parser.add_argument("-r", type=_unsigned, default=DEFAULT_RING_LEN, metavar="SIZE",
                        help="Receiving buffer ring size.")
    parser.add_argument("-x", type=_unsigned, default=DEFAULT_MAX_PROCESS_MIN, metavar="MIN",
                        help="Max process time (min).")
    parser.add_argument("superusers", nargs="*", help="Super user ids.")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse flags; numeric positional arguments become ``super_users``."""
    args = build_parser().parse_args(argv)
    args.super_users = [int(s) for s in args.superusers if _INTEGER.fullmatch(s)]
    return args


def _setup_logging(args: argparse.Namespace) -> None:
    if args.w:
        level = logging.WARNING
    elif args.d:
        level = logging.DEBUG
    else:
        level = logging.INFO
    log.setLevel(level)
    if not log.handlers:
        handler = logging.StreamHandler()
        if os.name == "nt":
            handler.terminator = ""
            handler.setFormatter(ColorFormatter())
        log.addHandler(handler)


def _config_from_args(args: argparse.Namespace) -> BotConfig:
    return BotConfig(
        nicknames=[args.n, *EXTRA_NICKNAMES],
        command_prefix=args.p,
        super_users=list(args.super_users),
        ring_len=args.r,
        latency=timedelta(milliseconds=args.l),
        max_process_time=timedelta(minutes=args.x),
        clients=[WSClient(url=args.u, access_token=args.t)],
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; returns the exit status."""
    args = parse_args(argv)
    if args.h:
        print("Usage:")
        build_parser().print_help()
        return 0
    _setup_logging(args)

    if args.c:
        config = load_config(args.c)
        log.info("[main] 从 %s 读取配置文件", args.c)
    else:
        config = _config_from_args(args)
        if args.s:
            save_config(config, args.s)
            log.info("[main] 配置文件已保存到 %s", args.s)
            return 0

    print(
        "\n======================[ZeroBot-Plugin]======================\n"
        f"{BANNER}\n"
        "可发送\"/服务列表\"查看 bot 功能\n"
        "============================================================\n"
    )
    log.info(
        "[main] %d 个连接, 命令前缀 %s",
        len(config.clients) + len(config.servers),
        config.command_prefix,
    )
    return 0