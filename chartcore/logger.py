"""A minimal timestamped logger writing to text streams."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Optional, TextIO

_VERB = re.compile(r"%(%|v)")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _rfc3339_nano(moment: datetime) -> str:
    stamp = moment.strftime("%Y-%m-%dT%H:%M:%S")
    if moment.microsecond:
        stamp += "." + f"{moment.microsecond:06d}".rstrip("0")
    return stamp + "Z"


def _sprintf(fmt: str, args: tuple[Any, ...]) -> str:
    pattern = _VERB.sub(lambda m: "%%" if m.group(1) == "%" else "%s", fmt)
    return pattern % args


@dataclass
class StdoutLogger:
    """Writes each message as one line prefixed by a UTC timestamp.

    ``time_format`` is a strftime pattern; when unset, timestamps are
    RFC 3339 with trailing fractional zeros dropped.
    """

    time_format: Optional[str] = None
    stdout: TextIO = field(default_factory=lambda: sys.stdout)
    stderr: TextIO = field(default_factory=lambda: sys.stderr)
    clock: Callable[[], datetime] = field(default=_utc_now, repr=False)

    def _timestamp(self) -> str:
        moment = self.clock()
        if moment.tzinfo is not None:
            moment = moment.astimezone(timezone.utc)
        if self.time_format:
            return moment.strftime(self.time_format)
        return _rfc3339_nano(moment)

    def info(self, *args: Any) -> None:
        self.println("[INFO]", *args)

    def infof(self, fmt: str, *args: Any) -> None:
        self.println("[INFO]", _sprintf(fmt, args))

    def debug(self, *args: Any) -> None:
        self.println("[DEBUG]", *args)

    def debugf(self, fmt: str, *args: Any) -> None:
        self.println("[DEBUG]", _sprintf(fmt, args))

    def error(self, *args: Any) -> None:
        self.println("[ERROR]", *args)

    def errorf(self, fmt: str, *args: Any) -> None:
        self.println("[ERROR]", _sprintf(fmt, args))

    def err(self, exc: Optional[BaseException]) -> None:
        """Log an exception, if one is given."""
        if exc is not None:
            self.println("[ERROR]", str(exc))

    def fatal_err(self, exc: Optional[BaseException]) -> None:
        """Log an exception, if one is given, and exit with status 1."""
        if exc is not None:
            self.println("[FATAL]", str(exc))
            raise SystemExit(1)

    def println(self, *args: Any) -> None:
        """Write a timestamped line to stdout."""
        print(self._timestamp(), *args, file=self.stdout)

    def errorln(self, *args: Any) -> None:
        """Write a timestamped line to stderr."""
        print(self._timestamp(), *args, file=self.stderr)


def log_info(logger: Optional[StdoutLogger], *args: Any) -> None:
    """Log an info message if a logger is set."""
    if logger is not None:
        logger.info(*args)


def log_infof(logger: Optional[StdoutLogger], fmt: str, *args: Any) -> None:
    """Log a formatted info message if a logger is set."""
    if logger is not None:
        logger.infof(fmt, *args)


def log_debug(logger: Optional[StdoutLogger], *args: Any) -> None:
    """Log a debug message if a logger is set."""
    if logger is not None:
        logger.debug(*args)


def log_debugf(logger: Optional[StdoutLogger], fmt: str, *args: Any) -> None:
    """Log a formatted debug message if a logger is set."""
    if logger is not None:
        logger.debugf(fmt, *args)