"""Non-blocking timer and stopwatch on a ThreadScheduler.

Each tick is reported through logging rather than an overwritten line.

Run: python examples/scheduled.py
"""

import logging
import time

from clock_timer import ScheduledStopwatch, ScheduledTimer


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    timer = ScheduledTimer(0, 0, 3)
    print(f"Timer created with duration: {timer.duration} seconds")
    timer.start().result()
    print("Timer completed!")

    stopwatch = ScheduledStopwatch()
    stopwatch.start()
    time.sleep(3.2)
    print(f"Stopwatch stopped at {stopwatch.stop()} seconds")
    stopwatch.reset()
    print("Stopwatch reset")


if __name__ == "__main__":
    main()
