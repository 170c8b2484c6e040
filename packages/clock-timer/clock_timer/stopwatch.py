"""Stopwatch - counts up once per second until stopped.

Two ways to stop a running stopwatch:

1. Cooperative: any holder of the instance calls ``stop()`` (or sets
   ``status`` to ``StopwatchStatus.STOPPED``). The loop notices at the start of
   its next iteration, writes the final line, calls ``on_stop`` and returns.
2. Interrupt: SIGINT while ``run`` is active on the main thread. The handler
   reads the shared counter, writes the final line, calls ``on_stop`` and
   exits the process.
"""

import logging
import signal
import sys
import threading
import time
from typing import Any, Callable

from clock_timer.counter import AtomicCounter
from clock_timer.display import write_final, write_tick
from clock_timer.types import OnStop, Sink, StopwatchStatus

logger = logging.getLogger(__name__)


class Stopwatch:
    def __init__(self, on_stop: OnStop) -> None:
        self._counter = AtomicCounter(0)
        self._status = StopwatchStatus.RUNNING
        self._on_stop = on_stop
        self._fired = False
        self._fire_lock = threading.Lock()

    @property
    def current_time(self) -> int:
        return self._counter.load()

    @property
    def on_stop(self) -> OnStop:
        return self._on_stop

    @property
    def status(self) -> StopwatchStatus:
        return self._status

    @status.setter
    def status(self, value: StopwatchStatus) -> None:
        if not isinstance(value, StopwatchStatus):
            raise ValueError(f"status must be a StopwatchStatus, got {value!r}")
        if value is StopwatchStatus.RUNNING and self._status is StopwatchStatus.STOPPED:
            raise ValueError("A stopped stopwatch cannot be set running again")
        self._status = value

    @property
    def finished(self) -> bool:
        """True once ``on_stop`` has been called."""
        return self._fired

    def stop(self) -> None:
        self._status = StopwatchStatus.STOPPED

    def run(
        self,
        sink: Sink | None = None,
        sleep: Callable[[float], None] | None = None,
        handle_interrupt: bool = True,
    ) -> int:
        """Display elapsed time until stopped; return the final elapsed seconds."""
        if self._fired:
            raise RuntimeError("Stopwatch has already finished")
        if sink is None:
            sink = sys.stdout
        if sleep is None:
            sleep = time.sleep

        previous_handler = None
        installed = False
        if handle_interrupt:
            if threading.current_thread() is threading.main_thread():
                previous_handler = signal.signal(
                    signal.SIGINT, self._make_interrupt_handler(sink)
                )
                installed = True
                logger.debug("SIGINT handler installed")
            else:
                logger.warning(
                    "Stopwatch running off the main thread; Ctrl-C will not stop it"
                )

        logger.debug("Stopwatch started at %d seconds", self._counter.load())
        try:
            while self._status is StopwatchStatus.RUNNING:
                write_tick(sink, self._counter.load())
                sleep(1)
                self._counter.fetch_add(1)
        finally:
            if installed:
                # None means the previous handler was not installed from Python.
                if previous_handler is None:
                    previous_handler = signal.SIG_DFL
                signal.signal(signal.SIGINT, previous_handler)

        final_time = self._counter.load()
        logger.debug("Stopwatch stopped at %d seconds", final_time)
        self._finish(sink, final_time)
        return final_time

    def _make_interrupt_handler(self, sink: Sink) -> Callable[[int, Any], None]:
        def handle_interrupt(signum: int, frame: Any) -> None:
            final_time = self._counter.load()
            self._status = StopwatchStatus.STOPPED
            logger.debug("Interrupted at %d seconds", final_time)
            if self._finish(sink, final_time):
                sys.exit(0)

        return handle_interrupt

    def _finish(self, sink: Sink, final_time: int) -> bool:
        """Write the final line and call ``on_stop``; False if already claimed."""
        # Non-blocking: the interrupt handler may preempt the loop's own
        # _finish on the same thread.
        if not self._fire_lock.acquire(blocking=False):
            return False
        try:
            if self._fired:
                return False
            self._fired = True
        finally:
            self._fire_lock.release()
        write_final(sink, final_time)
        self._on_stop(final_time)
        return True
