"""H:M:S rendering and self-overwriting line output."""

from __future__ import annotations

from clock_timer.types import OutputError, Sink


def split_hms(total: int) -> tuple[int, int, int]:
    return total // 3600, (total % 3600) // 60, total % 60


def format_hms(total: int) -> str:
    """Format a second count as ``H:M:S`` without zero padding."""
    hours, minutes, seconds = split_hms(total)
    return f"{hours}:{minutes}:{seconds}"


def write_tick(sink: Sink, total: int) -> None:
    """Write a non-terminal line; the next write overwrites it in place."""
    _emit(sink, format_hms(total) + "\r")


def write_final(sink: Sink, total: int) -> None:
    _emit(sink, format_hms(total) + "\n")


def _emit(sink: Sink, text: str) -> None:
    try:
        sink.write(text)
        sink.flush()
    except (OSError, ValueError) as exc:
        # ValueError covers writes to a closed stream.
        raise OutputError(f"Failed to write {text!r} to output: {exc}") from exc
