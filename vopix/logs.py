"""Level-filtered logging to a stream and an optional file."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import IO, Any, Optional


class LogLevel(IntEnum):
    """Severity levels; a message is shown when its level is at most the logger's."""

    NO_LOGGING = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4


class Logger:
    """Writes messages to a stream and, when opened, a log file."""

    def __init__(
        self, level: LogLevel = LogLevel.INFO, stream: Optional[IO[str]] = None
    ) -> None:
        self.level = level
        self.stream = stream if stream is not None else sys.stdout
        self._file: Optional[IO[str]] = None

    @property
    def file_open(self) -> bool:
        return self._file is not None

    def log(self, level: LogLevel, message: str, *args: Any) -> None:
        """Write ``message % args`` if ``level`` passes the filter."""
        if level > self.level:
            return
        text = message % args if args else message
        self.stream.write(text)
        if self._file is not None:
            self._file.write(text)

    def open_file(self, path: str) -> None:
        """Start copying messages to ``path``; on failure file logging stays off."""
        self.close_file()
        try:
            self._file = open(path, "w", encoding="utf-8")
        except OSError:
            self._file = None
            self.log(
                LogLevel.ERROR,
                "OpenLogFile: Failed to open log file, file logging disabled\n",
            )

    def close_file(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close_file()