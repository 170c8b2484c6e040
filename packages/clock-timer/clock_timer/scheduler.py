"""Cancelable one-shot and repeating callbacks for non-blocking hosts."""

from __future__ import annotations

import threading
from typing import Callable, Protocol


class Handle(Protocol):
    @property
    def active(self) -> bool: ...

    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay_ms: int, fn: Callable[[], None]) -> Handle: ...

    def call_every(self, interval_ms: int, fn: Callable[[], None]) -> Handle: ...


class _TimerHandle:
    def __init__(self, timer: threading.Timer) -> None:
        self._timer = timer

    @property
    def active(self) -> bool:
        return self._timer.is_alive() and not self._timer.finished.is_set()

    def cancel(self) -> None:
        self._timer.cancel()


class _IntervalHandle:
    def __init__(self, interval: float, fn: Callable[[], None]) -> None:
        self._interval = interval
        self._fn = fn
        self._cancelled = threading.Event()
        self._thread = threading.Thread(target=self._loop, daemon=True)

    @property
    def active(self) -> bool:
        return not self._cancelled.is_set()

    def start(self) -> None:
        self._thread.start()

    def cancel(self) -> None:
        self._cancelled.set()

    def _loop(self) -> None:
        while not self._cancelled.wait(self._interval):
            if self._cancelled.is_set():
                break
            self._fn()


class ThreadScheduler:
    """Runs callbacks on daemon threads."""

    def call_later(self, delay_ms: int, fn: Callable[[], None]) -> Handle:
        if delay_ms < 0:
            raise ValueError("delay_ms must not be negative")
        timer = threading.Timer(delay_ms / 1000, fn)
        timer.daemon = True
        timer.start()
        return _TimerHandle(timer)

    def call_every(self, interval_ms: int, fn: Callable[[], None]) -> Handle:
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        handle = _IntervalHandle(interval_ms / 1000, fn)
        handle.start()
        return handle
