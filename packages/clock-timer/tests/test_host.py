"""Tests for the scheduler-driven timer and stopwatch."""

from __future__ import annotations

import logging
from typing import Callable

import pytest
from clock_timer.host import ScheduledStopwatch, ScheduledTimer
from clock_timer.types import InvalidDurationError


class FakeHandle:
    def __init__(self, fn: Callable[[], None], repeat: bool) -> None:
        self.fn = fn
        self.repeat = repeat
        self.cancelled = False

    @property
    def active(self) -> bool:
        return not self.cancelled

    def cancel(self) -> None:
        self.cancelled = True


class FakeScheduler:
    """Collects scheduled callbacks; ``advance`` fires one second's worth."""

    def __init__(self) -> None:
        self.handles: list[FakeHandle] = []
        self.delays: list[int] = []

    def call_later(self, delay_ms: int, fn: Callable[[], None]) -> FakeHandle:
        self.delays.append(delay_ms)
        handle = FakeHandle(fn, repeat=False)
        self.handles.append(handle)
        return handle

    def call_every(self, interval_ms: int, fn: Callable[[], None]) -> FakeHandle:
        self.delays.append(interval_ms)
        handle = FakeHandle(fn, repeat=True)
        self.handles.append(handle)
        return handle

    def advance(self, seconds: int = 1) -> None:
        for _ in range(seconds):
            due = [h for h in self.handles if h.active]
            self.handles = [h for h in due if h.repeat]
            for handle in due:
                handle.fn()


# --- ScheduledTimer ---

def test_timer_getters():
    timer = ScheduledTimer(0, 1, 30, scheduler=FakeScheduler())
    assert timer.duration == 90
    assert (timer.hours, timer.minutes, timer.seconds) == (0, 1, 30)


def test_timer_rejects_zero_duration():
    with pytest.raises(InvalidDurationError):
        ScheduledTimer(0, 0, 0, scheduler=FakeScheduler())


def test_timer_future_resolves_at_zero():
    scheduler = FakeScheduler()
    ticks = []
    timer = ScheduledTimer(0, 0, 3, scheduler=scheduler, on_tick=ticks.append)

    future = timer.start()
    assert ticks == [3]
    assert not future.done()

    scheduler.advance(2)
    assert ticks == [3, 2, 1]
    assert not future.done()

    scheduler.advance()
    assert future.done()
    assert future.result() is None
    assert scheduler.delays == [1000, 1000, 1000]


def test_timer_logs_each_remaining_value(caplog):
    scheduler = FakeScheduler()
    timer = ScheduledTimer(0, 0, 2, scheduler=scheduler)
    with caplog.at_level(logging.INFO, logger="clock_timer.host"):
        timer.start()
        scheduler.advance(2)
    assert caplog.messages == ["Timer: 0:0:2", "Timer: 0:0:1"]


def test_timer_start_twice_returns_same_future():
    scheduler = FakeScheduler()
    timer = ScheduledTimer(0, 0, 2, scheduler=scheduler)
    assert timer.start() is timer.start()


def test_timer_cancel():
    scheduler = FakeScheduler()
    ticks = []
    timer = ScheduledTimer(0, 0, 5, scheduler=scheduler, on_tick=ticks.append)
    future = timer.start()
    scheduler.advance()

    timer.cancel()
    scheduler.advance(10)

    assert future.cancelled()
    assert ticks == [5, 4]


def test_timer_restart_after_completion():
    scheduler = FakeScheduler()
    timer = ScheduledTimer(0, 0, 1, scheduler=scheduler)
    first = timer.start()
    scheduler.advance()
    assert first.done()

    second = timer.start()
    assert second is not first
    scheduler.advance()
    assert second.done()


# --- ScheduledStopwatch ---

def test_stopwatch_initial_state():
    stopwatch = ScheduledStopwatch(scheduler=FakeScheduler())
    assert stopwatch.current_time == 0
    assert not stopwatch.is_running


def test_stopwatch_counts_while_running():
    scheduler = FakeScheduler()
    ticks = []
    stopwatch = ScheduledStopwatch(scheduler=scheduler, on_tick=ticks.append)
    stopwatch.start()
    assert stopwatch.is_running

    scheduler.advance(5)
    assert stopwatch.current_time == 5
    assert ticks == [1, 2, 3, 4, 5]
    assert scheduler.delays == [1000]


def test_stopwatch_stop_returns_elapsed_and_cancels():
    scheduler = FakeScheduler()
    stopwatch = ScheduledStopwatch(scheduler=scheduler)
    stopwatch.start()
    scheduler.advance(3)

    assert stopwatch.stop() == 3
    assert not stopwatch.is_running
    scheduler.advance(3)
    assert stopwatch.current_time == 3


def test_stopwatch_stop_when_idle():
    stopwatch = ScheduledStopwatch(scheduler=FakeScheduler())
    assert stopwatch.stop() == 0


def test_stopwatch_start_is_idempotent():
    scheduler = FakeScheduler()
    stopwatch = ScheduledStopwatch(scheduler=scheduler)
    stopwatch.start()
    stopwatch.start()
    scheduler.advance()
    assert stopwatch.current_time == 1
    assert len(scheduler.delays) == 1


def test_stopwatch_reset():
    scheduler = FakeScheduler()
    stopwatch = ScheduledStopwatch(scheduler=scheduler)
    stopwatch.start()
    scheduler.advance(4)

    stopwatch.reset()
    assert stopwatch.current_time == 0
    assert not stopwatch.is_running


def test_stopwatch_logs_ticks(caplog):
    scheduler = FakeScheduler()
    stopwatch = ScheduledStopwatch(scheduler=scheduler)
    with caplog.at_level(logging.INFO, logger="clock_timer.host"):
        stopwatch.start()
        scheduler.advance(2)
    assert caplog.messages == ["Stopwatch: 0:0:1", "Stopwatch: 0:0:2"]


def test_stopwatch_tick_in_flight_during_stop_is_dropped():
    scheduler = FakeScheduler()
    stopwatch = ScheduledStopwatch(scheduler=scheduler)
    stopwatch.start()
    scheduler.advance(2)
    in_flight = scheduler.handles[0].fn

    assert stopwatch.stop() == 2
    in_flight()
    assert stopwatch.current_time == 2


def test_stopwatch_tick_in_flight_during_reset_is_dropped():
    scheduler = FakeScheduler()
    stopwatch = ScheduledStopwatch(scheduler=scheduler)
    stopwatch.start()
    scheduler.advance(3)
    in_flight = scheduler.handles[0].fn

    stopwatch.reset()
    in_flight()
    assert stopwatch.current_time == 0
    assert scheduler.handles[0].cancelled


def test_stale_tick_does_not_count_after_restart():
    scheduler = FakeScheduler()
    stopwatch = ScheduledStopwatch(scheduler=scheduler)
    stopwatch.start()
    stale = scheduler.handles[0].fn
    stopwatch.stop()
    stopwatch.start()

    stale()
    assert stopwatch.current_time == 0
    scheduler.advance()
    assert stopwatch.current_time == 1
