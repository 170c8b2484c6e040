"""Shared types, errors and protocols for clock-timer."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Protocol

OnStop = Callable[[int], None]


class Sink(Protocol):
    def write(self, text: str, /) -> object: ...

    def flush(self) -> None: ...


class StopwatchStatus(Enum):
    RUNNING = "running"
    STOPPED = "stopped"


class InvalidDurationError(ValueError):
    """Raised when a countdown cannot be built from the given components."""

    def __init__(self, hours: int, minutes: int, seconds: int, message: str) -> None:
        self.hours = hours
        self.minutes = minutes
        self.seconds = seconds
        super().__init__(message)


class OutputError(OSError):
    """Raised when writing to or flushing the output sink fails."""
