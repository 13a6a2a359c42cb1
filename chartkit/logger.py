"""A minimal logger writing timestamped lines to text streams."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional, TextIO

DEFAULT_TIME_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"


@dataclass
class StdoutLogger:
    """Writes lines prefixed with a UTC timestamp and a level tag."""

    time_format: str = DEFAULT_TIME_FORMAT
    stdout: TextIO = field(default_factory=lambda: sys.stdout)
    stderr: TextIO = field(default_factory=lambda: sys.stderr)

    def _timestamp(self) -> str:
        return datetime.now(timezone.utc).strftime(self.time_format)

    def info(self, *args: Any) -> None:
        self.println("[INFO]", *args)

    def infof(self, fmt: str, *args: Any) -> None:
        self.println("[INFO]", _format(fmt, args))

    def debug(self, *args: Any) -> None:
        self.println("[DEBUG]", *args)

    def debugf(self, fmt: str, *args: Any) -> None:
        self.println("[DEBUG]", _format(fmt, args))

    def error(self, *args: Any) -> None:
        self.println("[ERROR]", *args)

    def errorf(self, fmt: str, *args: Any) -> None:
        self.println("[ERROR]", _format(fmt, args))

    def err(self, error: Optional[BaseException]) -> None:
        """Log an exception's message, if there is one."""
        if error is not None:
            self.println("[ERROR]", str(error))

    def fatal_err(self, error: Optional[BaseException]) -> None:
        """Log an exception's message and exit with status 1, if there is one."""
        if error is not None:
            self.println("[FATAL]", str(error))
            raise SystemExit(1)

    def println(self, *args: Any) -> None:
        """Write a timestamped line to the standard output stream."""
        print(self._timestamp(), *args, file=self.stdout)

    def errorln(self, *args: Any) -> None:
        """Write a timestamped line to the error stream."""
        print(self._timestamp(), *args, file=self.stderr)


def _format(fmt: str, args: tuple) -> str:
    return fmt % args if args else fmt


def info(log: Optional[StdoutLogger], *args: Any) -> None:
    """Log an info message if a logger is given."""
    if log is not None:
        log.info(*args)


def infof(log: Optional[StdoutLogger], fmt: str, *args: Any) -> None:
    """Log a formatted info message if a logger is given."""
    if log is not None:
        log.infof(fmt, *args)


def debug(log: Optional[StdoutLogger], *args: Any) -> None:
    """Log a debug message if a logger is given."""
    if log is not None:
        log.debug(*args)


def debugf(log: Optional[StdoutLogger], fmt: str, *args: Any) -> None:
    """Log a formatted debug message if a logger is given."""
    if log is not None:
        log.debugf(fmt, *args)