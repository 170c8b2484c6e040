"""Countdown timer - fixed duration, one display line per second down to zero."""

import logging
import sys
import time
from typing import Callable, Iterator

from clock_timer.display import write_final, write_tick
from clock_timer.types import InvalidDurationError, OnStop, Sink

logger = logging.getLogger(__name__)


class Timer:
    def __init__(self, hours: int = 0, minutes: int = 0, seconds: int = 0) -> None:
        for component in (hours, minutes, seconds):
            if isinstance(component, bool) or not isinstance(component, int):
                raise InvalidDurationError(
                    hours, minutes, seconds,
                    f"Duration components must be integers, got {component!r}",
                )
        if hours < 0 or minutes < 0 or seconds < 0:
            raise InvalidDurationError(
                hours, minutes, seconds,
                f"Duration components must not be negative, got {hours}:{minutes}:{seconds}",
            )
        duration = hours * 3600 + minutes * 60 + seconds
        if duration == 0:
            raise InvalidDurationError(
                hours, minutes, seconds, "Duration needs to be 1 or more seconds."
            )
        self._duration = duration
        self._hours = hours
        self._minutes = minutes
        self._seconds = seconds

    @classmethod
    def from_seconds(cls, total: int) -> "Timer":
        return cls(seconds=total)

    @property
    def duration(self) -> int:
        return self._duration

    @property
    def hours(self) -> int:
        return self._hours

    @property
    def minutes(self) -> int:
        return self._minutes

    @property
    def seconds(self) -> int:
        return self._seconds

    def remaining(self) -> Iterator[int]:
        """Yield the displayed values from ``duration`` down to 0 inclusive."""
        return iter(range(self._duration, -1, -1))

    def run(
        self,
        sink: Sink | None = None,
        on_finish: OnStop | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        """Count down to zero, blocking the calling thread.

        Every non-zero value is written followed by a carriage return so the
        next tick overwrites it; the final ``0:0:0`` line ends with a newline.
        ``on_finish`` receives 0 once the final line has been written.
        """
        if sink is None:
            sink = sys.stdout
        if sleep is None:
            sleep = time.sleep
        logger.debug("Countdown started: %d seconds", self._duration)

        for current in self.remaining():
            if current == 0:
                write_final(sink, current)
                break
            write_tick(sink, current)
            sleep(1)

        logger.debug("Countdown finished")
        if on_finish is not None:
            on_finish(0)

    def __repr__(self) -> str:
        return (
            f"Timer(hours={self._hours}, minutes={self._minutes}, "
            f"seconds={self._seconds})"
        )
