"""CPU-time and wall-clock readings, and RFC 3339 local timestamps."""

from __future__ import annotations

import time
from datetime import datetime, timedelta, timezone

__all__ = [
    "TimerError",
    "process_cpu_usage",
    "thread_cpu_usage",
    "chrono_clock_now",
    "local_date_time_string",
    "format_rfc3339",
]

_UNKNOWN_OFFSET = "-00:00"


class TimerError(RuntimeError):
    """Raised when the operating system cannot supply a CPU-time reading."""


def process_cpu_usage() -> float:
    """Return the CPU time (user plus system) of this process, in seconds."""
    clock_id = getattr(time, "CLOCK_PROCESS_CPUTIME_ID", None)
    try:
        if clock_id is not None:
            return time.clock_gettime(clock_id)
        return time.process_time()
    except OSError as exc:
        raise TimerError(f"reading process CPU time failed: {exc}") from exc


def thread_cpu_usage() -> float:
    """Return the CPU time (user plus system) of the calling thread, in seconds."""
    clock_id = getattr(time, "CLOCK_THREAD_CPUTIME_ID", None)
    try:
        if clock_id is not None:
            return time.clock_gettime(clock_id)
        return time.thread_time()
    except AttributeError as exc:
        raise TimerError("per-thread timing is not available on this system") from exc
    except OSError as exc:
        raise TimerError(f"reading thread CPU time failed: {exc}") from exc


def chrono_clock_now() -> float:
    """Return a reading of a steady, high-resolution clock, in seconds.

    Only differences between readings are meaningful.
    """
    return time.perf_counter()


def _offset_text(offset: timedelta | None) -> str | None:
    """Render a whole-minute UTC offset as +HH:MM or -HH:MM, else None."""
    if offset is None:
        return None
    if offset.microseconds or offset.seconds % 60:
        return None
    total_minutes = int(offset.total_seconds()) // 60
    sign = "-" if total_minutes < 0 else "+"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


def format_rfc3339(moment: datetime) -> str:
    """Format a datetime as yyyy-mm-ddTHH:MM:SS followed by a +/-HH:MM offset.

    Fractions of a second are dropped. When the offset is unknown (a naive
    datetime, or one whose offset is not a whole number of minutes) the time
    is written as UTC with the offset -00:00, as RFC 3339 prescribes. Naive
    datetimes are taken to already be in UTC.
    """
    if not isinstance(moment, datetime):
        raise TypeError(f"expected a datetime, got {type(moment).__name__}")

    offset_text = _offset_text(moment.utcoffset())
    if offset_text is None:
        offset_text = _UNKNOWN_OFFSET
        if moment.tzinfo is not None and moment.utcoffset() is not None:
            moment = moment.astimezone(timezone.utc)

    stamp = (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )
    return stamp + offset_text


def local_date_time_string() -> str:
    """Return the current local time in RFC 3339 form, e.g. 2024-01-02T03:04:05+01:00."""
    return format_rfc3339(datetime.now().astimezone())