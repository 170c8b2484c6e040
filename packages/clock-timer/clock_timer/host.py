"""Non-blocking timer and stopwatch driven by a Scheduler.

These mirror the blocking ``Timer``/``Stopwatch`` for hosts that own their
own event loop: each tick is a scheduled callback and every displayed value
is reported through logging instead of a self-overwriting line.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future
from typing import Callable

from clock_timer.counter import AtomicCounter
from clock_timer.display import format_hms
from clock_timer.scheduler import Handle, Scheduler, ThreadScheduler
from clock_timer.timer import Timer

logger = logging.getLogger(__name__)

_TICK_MS = 1000

OnTick = Callable[[int], None]


class ScheduledTimer:
    def __init__(
        self,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        scheduler: Scheduler | None = None,
        on_tick: OnTick | None = None,
    ) -> None:
        self._timer = Timer(hours, minutes, seconds)
        self._scheduler = scheduler if scheduler is not None else ThreadScheduler()
        self._on_tick = on_tick
        self._handle: Handle | None = None
        self._future: Future[None] | None = None
        self._lock = threading.Lock()

    @property
    def duration(self) -> int:
        return self._timer.duration

    @property
    def hours(self) -> int:
        return self._timer.hours

    @property
    def minutes(self) -> int:
        return self._timer.minutes

    @property
    def seconds(self) -> int:
        return self._timer.seconds

    def start(self) -> Future[None]:
        """Start counting down; the returned future resolves at zero.

        Calling ``start`` again while a countdown is pending returns the
        same future.
        """
        with self._lock:
            if self._future is not None and not self._future.done():
                return self._future
            self._future = Future()
            future = self._future
        self._step(self._timer.duration, future)
        return future

    def cancel(self) -> None:
        with self._lock:
            if self._handle is not None:
                self._handle.cancel()
                self._handle = None
            if self._future is not None:
                self._future.cancel()

    def _step(self, remaining: int, future: Future[None]) -> None:
        if future.cancelled():
            return
        if remaining == 0:
            logger.debug("Scheduled countdown finished")
            with self._lock:
                self._handle = None
                if not future.done():
                    future.set_result(None)
            return

        logger.info("Timer: %s", format_hms(remaining))
        if self._on_tick is not None:
            self._on_tick(remaining)
        handle = self._scheduler.call_later(
            _TICK_MS, lambda: self._step(remaining - 1, future)
        )
        with self._lock:
            self._handle = handle


class ScheduledStopwatch:
    def __init__(
        self,
        scheduler: Scheduler | None = None,
        on_tick: OnTick | None = None,
    ) -> None:
        self._scheduler = scheduler if scheduler is not None else ThreadScheduler()
        self._on_tick = on_tick
        self._counter = AtomicCounter(0)
        self._handle: Handle | None = None
        self._generation = 0
        self._lock = threading.Lock()

    @property
    def current_time(self) -> int:
        return self._counter.load()

    @property
    def is_running(self) -> bool:
        return self._handle is not None

    def start(self) -> None:
        with self._lock:
            if self._handle is not None:
                return
            self._generation += 1
            generation = self._generation
            self._handle = self._scheduler.call_every(
                _TICK_MS, lambda: self._tick(generation)
            )
        logger.debug("Scheduled stopwatch started at %d seconds", self._counter.load())

    def stop(self) -> int:
        """Stop the stopwatch and return the elapsed seconds."""
        with self._lock:
            handle, self._handle = self._handle, None
            elapsed = self._counter.load()
        if handle is not None:
            handle.cancel()
            logger.debug("Scheduled stopwatch stopped at %d seconds", elapsed)
        return elapsed

    def reset(self) -> None:
        with self._lock:
            handle, self._handle = self._handle, None
            self._counter.store(0)
        if handle is not None:
            handle.cancel()

    def _tick(self, generation: int) -> None:
        # A tick already in flight when stop() ran must not count.
        with self._lock:
            if self._handle is None or generation != self._generation:
                return
            elapsed = self._counter.fetch_add(1) + 1
        logger.info("Stopwatch: %s", format_hms(elapsed))
        if self._on_tick is not None:
            self._on_tick(elapsed)
