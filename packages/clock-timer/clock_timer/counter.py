"""Shared elapsed-seconds cell for the stopwatch loop and its interrupt handler."""

import threading


class AtomicCounter:
    def __init__(self, value: int = 0) -> None:
        self._value = value
        # Reentrant: a SIGINT handler runs on the main thread and may
        # interrupt fetch_add while the lock is held.
        self._lock = threading.RLock()

    def load(self) -> int:
        with self._lock:
            return self._value

    def store(self, value: int) -> None:
        with self._lock:
            self._value = value

    def fetch_add(self, amount: int = 1) -> int:
        """Add ``amount`` and return the value held before the addition."""
        with self._lock:
            previous = self._value
            self._value = previous + amount
            return previous
