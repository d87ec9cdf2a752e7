"""Clock value conversions shared by the cue parsers."""

from __future__ import annotations


def hms_to_microseconds(
    hours: int, minutes: int, seconds: int, milliseconds: int = 0
) -> int:
    """Convert an hours/minutes/seconds/milliseconds clock value to microseconds."""
    return (
        hours * 3_600_000
        + minutes * 60_000
        + seconds * 1_000
        + milliseconds
    ) * 1_000


def format_timestamp(microseconds: int) -> str:
    """Render microseconds as HH:MM:SS.mmm for display."""
    sign = "-" if microseconds < 0 else ""
    total_ms = abs(microseconds) // 1_000
    hours, rest = divmod(total_ms, 3_600_000)
    minutes, rest = divmod(rest, 60_000)
    seconds, millis = divmod(rest, 1_000)
    return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}.{millis:03d}"
