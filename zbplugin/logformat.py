"""Coloured single-line log formatting for consoles."""

from __future__ import annotations

import logging

COLOR_PANIC = "\x1b[1;31m"
COLOR_FATAL = "\x1b[1;31m"
COLOR_ERROR = "\x1b[31m"
COLOR_WARN = "\x1b[33m"
COLOR_INFO = "\x1b[37m"
COLOR_DEBUG = "\x1b[32m"
COLOR_TRACE = "\x1b[36m"
COLOR_RESET = "\x1b[0m"


def level_color(levelno: int) -> str:
    """The ANSI colour code used for a logging level."""
    if levelno > logging.CRITICAL:
        return COLOR_PANIC
    if levelno == logging.CRITICAL:
        return COLOR_FATAL
    if levelno >= logging.ERROR:
        return COLOR_ERROR
    if levelno >= logging.WARNING:
        return COLOR_WARN
    if levelno >= logging.INFO:
        return COLOR_INFO
    if levelno >= logging.DEBUG:
        return COLOR_DEBUG
    return COLOR_TRACE


class ColorFormatter(logging.Formatter):
    """Formats records as ``[LEVEL] message`` wrapped in the level's colour."""

    def format(self, record: logging.LogRecord) -> str:
        return (
            f"{level_color(record.levelno)}[{record.levelname.upper()}] "
            f"{record.getMessage()} \n{COLOR_RESET}"
        )