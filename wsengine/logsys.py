"""Coloured console logging with a file mirror."""

from __future__ import annotations

import functools
import sys
from datetime import datetime
from enum import Enum
from typing import IO, Callable, Optional

from wsengine.logfile import LogFile


class Color(str, Enum):
    """ANSI escape sequences used for console output."""

    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    BOLD = "\033[1m"
    UNDERLINE = "\033[4m"
    BG_CYAN = "\033[46m"
    WHITE = "\033[97m"
    RESET = "\033[0m"

    def __str__(self) -> str:
        return self.value


def current_date_time() -> str:
    """Local time formatted as ``YYYY-MM-DD HH:MM:SS``."""
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


class Log:
    """Levelled logger writing to the console and a log file.

    Info, error, critical and severe messages are always shown; debug needs
    level 1, warning level 2 and trace level 3. Errors go to the console only.
    """

    def __init__(
        self,
        log_file: Optional[LogFile] = None,
        stdout: Optional[IO[str]] = None,
        stderr: Optional[IO[str]] = None,
    ) -> None:
        self.level = 1
        self._file = log_file if log_file is not None else LogFile()
        self._stdout = stdout
        self._stderr = stderr
        self._file.write_info(current_date_time(), "LogSys created successfully")
        self._emit(self._out, Color.WHITE, "INFO", "LogSys created Successfully")

    def _out(self) -> IO[str]:
        return self._stdout if self._stdout is not None else sys.stdout

    def _err(self) -> IO[str]:
        return self._stderr if self._stderr is not None else sys.stderr

    @staticmethod
    def _emit(
        stream: Callable[[], IO[str]], color: Color, label: str, msg: object, suffix: str = ""
    ) -> None:
        line = f"{color.value}[{current_date_time()} | {label}:] {msg}{suffix}{Color.RESET.value}"
        print(line, file=stream(), flush=True)

    def set_log_level(self, level: int) -> None:
        self.level = level

    def print(self, message: object) -> None:
        print(f"{Color.WHITE.value}{message}{Color.RESET.value}", file=self._out(), flush=True)

    def info(self, message: object) -> None:
        self._file.write_info(current_date_time(), message)
        self._emit(self._out, Color.WHITE, "INFO", message)

    def error(self, msg: object, code: int = 0) -> None:
        self._emit(self._err, Color.RED, "ERROR", msg, f" Error Code: {code}")

    def critical(self, msg: object, code: int = 0) -> None:
        self._file.write_critical(current_date_time(), msg)
        self._emit(self._err, Color.RED, "CRITICAL ERROR", msg, f" Error Code: {code}")

    def severe(self, msg: object, code: int = 0) -> None:
        self._file.write_severe(current_date_time(), msg)
        self._emit(self._err, Color.RED, "SEVERE ERROR", msg, f" Error Code: {code}")

    def trace(self, msg: object) -> None:
        if self.level >= 3:
            self._file.write_trace(current_date_time(), msg)
            self._emit(self._out, Color.BLUE, "TRACE", msg)

    def debug(self, msg: object) -> None:
        if self.level >= 1:
            self._file.write_debug(current_date_time(), msg)
            self._emit(self._out, Color.GREEN, "DEBUG", msg)

    def warning(self, msg: object, code: int = 0) -> None:
        if self.level >= 2:
            self._file.write_warning(current_date_time(), msg)
            suffix = f" Warning Code: {code}" if code != 0 else ""
            self._emit(self._err, Color.YELLOW, "WARNING", msg, suffix)


@functools.lru_cache(maxsize=None)
def get_log() -> Log:
    """The process-wide logger, created on first use."""
    return Log()