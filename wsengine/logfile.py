"""Append-only log file writer."""

from __future__ import annotations

import os
import sys
import threading
from typing import IO, Optional

DEFAULT_LOG_PATH = "log/default.log"


class LogFile:
    """Writes formatted log lines to a file opened in append mode.

    Failures to open or write are reported on standard error rather than
    raised, so that logging never brings the program down.
    """

    def __init__(self, path: "str | os.PathLike[str]" = DEFAULT_LOG_PATH) -> None:
        self.path = os.fspath(path)
        self._file: Optional[IO[str]] = None
        self._lock = threading.Lock()
        self._open()

    @property
    def is_open(self) -> bool:
        return self._file is not None and not self._file.closed

    def _open(self) -> None:
        self.close()
        try:
            self._file = open(self.path, "a", encoding="utf-8")
        except OSError:
            self._file = None
            print(f"Failed to open log file: {self.path}", file=sys.stderr)

    def set_log_path(self, path: "str | os.PathLike[str]") -> None:
        """Switch to another file, closing the current one."""
        self.path = os.fspath(path)
        self._open()

    def write_log(self, level: str, time: str, message: object) -> None:
        with self._lock:
            if not self.is_open:
                print("Log file not open!", file=sys.stderr)
                return
            assert self._file is not None
            self._file.write(f"[ {time} | {level}: ] {message}\n")
            self._file.flush()

    def write_info(self, time: str, message: object) -> None:
        self.write_log("INFO", time, message)

    def write_critical(self, time: str, message: object) -> None:
        self.write_log("CRITICAL", time, message)

    def write_severe(self, time: str, message: object) -> None:
        self.write_log("SEVERE", time, message)

    def write_debug(self, time: str, message: object) -> None:
        self.write_log("DEBUG", time, message)

    def write_trace(self, time: str, message: object) -> None:
        self.write_log("TRACE", time, message)

    def write_fatal(self, time: str, message: object) -> None:
        self.write_log("FATAL", time, message)

    def write_warning(self, time: str, message: object) -> None:
        self.write_log("WARNING", time, message)

    def close(self) -> None:
        if self._file is not None and not self._file.closed:
            self._file.close()
        self._file = None

    def __enter__(self) -> "LogFile":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()