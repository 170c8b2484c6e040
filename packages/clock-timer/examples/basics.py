"""Countdown then stopwatch -- the two clock-timer loops side by side.

Demonstrates:
- Building a Timer from hours/minutes/seconds and running it to zero
- Stopping a Stopwatch cooperatively from another thread
- Receiving the final elapsed time in the on_stop callback

Run: python examples/basics.py
"""

import sys
import threading
import time

from clock_timer import Stopwatch, Timer


def main() -> None:
    print("=== Countdown (5 seconds) ===")
    timer = Timer(0, 0, 5)
    timer.run(sys.stdout, on_finish=lambda _: print("Timer finished!"))

    print("\n=== Stopwatch (stopped after ~3 seconds) ===")
    stopwatch = Stopwatch(lambda t: print(f"Stopwatch finished at {t} seconds!"))

    def stop_later() -> None:
        time.sleep(3.5)
        stopwatch.stop()

    threading.Thread(target=stop_later, daemon=True).start()
    stopwatch.run(sys.stdout)


if __name__ == "__main__":
    main()
