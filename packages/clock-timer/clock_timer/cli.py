"""Command-line entry point: ``clock-timer timer H M S`` or ``clock-timer stopwatch``."""

from __future__ import annotations

import argparse
import logging
import sys

from clock_timer.display import format_hms
from clock_timer.stopwatch import Stopwatch
from clock_timer.timer import Timer
from clock_timer.types import InvalidDurationError


def _report_stop(elapsed: int) -> None:
    print(f"Stopped at {format_hms(elapsed)} ({elapsed} seconds)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clock-timer",
        description="Countdown timer and stopwatch for the terminal",
    )
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="enable debug logging on stderr")
    commands = parser.add_subparsers(dest="command", required=True)

    timer = commands.add_parser("timer", help="count down to zero")
    timer.add_argument("hours", type=int, help="hours component")
    timer.add_argument("minutes", type=int, help="minutes component")
    timer.add_argument("seconds", type=int, help="seconds component")

    commands.add_parser("stopwatch", help="count up until Ctrl-C")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command == "timer":
        try:
            timer = Timer(args.hours, args.minutes, args.seconds)
        except InvalidDurationError as exc:
            parser.error(str(exc))
        timer.run(sys.stdout)
        return 0

    stopwatch = Stopwatch(_report_stop)
    stopwatch.run(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
