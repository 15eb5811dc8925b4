"""Coloured logging to standard error and the positions-evaluated report."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import TextIO

from onyx.chips import ANSI_DEFAULT


class LogLevel(IntEnum):
    FATAL = 0
    ERROR = 1
    WARN = 2
    SUCCESS = 3
    INFO = 4
    DEBUG = 5

    @property
    def color(self) -> str:
        return _LEVEL_COLORS[self]


_LEVEL_COLORS = {
    LogLevel.FATAL: "\x1b[91m",
    LogLevel.ERROR: "\x1b[91m",
    LogLevel.WARN: "\x1b[93m",
    LogLevel.SUCCESS: "\x1b[92m",
    LogLevel.INFO: "\x1b[39m",
    LogLevel.DEBUG: "\x1b[37m",
}

LOG_LEVEL = LogLevel.DEBUG


def intercept_default_color(message: str, color: str) -> str:
    """Replace resets inside `message` so nested colours fall back to `color`."""
    return message.replace(ANSI_DEFAULT, color)


def write(
    level: LogLevel,
    color: str | None,
    message: str,
    stream: TextIO | None = None,
) -> None:
    """Write one coloured line if `level` is enabled; colour defaults to the level's."""
    if level > LOG_LEVEL:
        return
    if color is None:
        color = LogLevel(level).color
    out = sys.stderr if stream is None else stream
    body = intercept_default_color(message, color)
    print(f"{color}{body}{ANSI_DEFAULT}", file=out)


def fatal(message: str) -> None:
    """Log the message and exit with status 1."""
    write(LogLevel.FATAL, LogLevel.FATAL.color, message)
    raise SystemExit(1)


def error(message: str) -> None:
    write(LogLevel.ERROR, LogLevel.ERROR.color, message)


def warn(message: str) -> None:
    write(LogLevel.WARN, LogLevel.WARN.color, message)


def success(message: str) -> None:
    write(LogLevel.SUCCESS, LogLevel.SUCCESS.color, message)


def info(message: str) -> None:
    write(LogLevel.INFO, LogLevel.INFO.color, message)


def debug(message: str) -> None:
    write(LogLevel.DEBUG, LogLevel.DEBUG.color, message)


def format_positions(num_positions: int) -> str:
    """Summarise a count of evaluated positions in millions or thousands."""
    if num_positions >= 1_000_000:
        amount, unit = num_positions // 1_000_000, "M"
    else:
        amount, unit = num_positions // 1_000, "k"
    return f"kibitz {amount}{unit} poziții evaluate"


def report_positions(num_positions: int, stream: TextIO | None = None) -> None:
    out = sys.stderr if stream is None else stream
    print(format_positions(num_positions), file=out)