"""clock-timer - a countdown timer and a stopwatch with a live H:M:S display."""

from clock_timer.display import format_hms, split_hms
from clock_timer.host import ScheduledStopwatch, ScheduledTimer
from clock_timer.scheduler import Scheduler, ThreadScheduler
from clock_timer.stopwatch import Stopwatch
from clock_timer.timer import Timer
from clock_timer.types import InvalidDurationError, OutputError, StopwatchStatus

__all__ = [
    "Timer",
    "Stopwatch",
    "StopwatchStatus",
    "ScheduledTimer",
    "ScheduledStopwatch",
    "Scheduler",
    "ThreadScheduler",
    "InvalidDurationError",
    "OutputError",
    "format_hms",
    "split_hms",
]
