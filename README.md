# benchtimers

Small timing primitives for benchmark harnesses, all in `benchtimers.timers`:

- `process_cpu_usage()` returns the CPU time (user plus system) used by the
  current process, in seconds.
- `thread_cpu_usage()` returns the CPU time (user plus system) used by the
  calling thread, in seconds.
- `chrono_clock_now()` returns a steady, high-resolution clock reading in
  seconds. Only the difference between two readings is meaningful.
- `local_date_time_string()` returns the current local time in RFC 3339 form,
  `yyyy-mm-ddTHH:MM:SS+HH:MM`.
- `format_rfc3339(moment)` formats a given `datetime` the same way.

If the operating system cannot report a CPU time, `TimerError` (a subclass of
`RuntimeError`) is raised.

## Installation

```
pip install benchtimers
```

## Usage

```python
from benchtimers.timers import (
    chrono_clock_now,
    local_date_time_string,
    process_cpu_usage,
    thread_cpu_usage,
)

print("Started", local_date_time_string())

wall_start = chrono_clock_now()
cpu_start = process_cpu_usage()
thread_start = thread_cpu_usage()

total = sum(i * i for i in range(1_000_000))

print(f"wall:   {chrono_clock_now() - wall_start:.6f} s")
print(f"cpu:    {process_cpu_usage() - cpu_start:.6f} s")
print(f"thread: {thread_cpu_usage() - thread_start:.6f} s")
```

Formatting a fixed moment:

```python
from datetime import datetime, timedelta, timezone
from benchtimers.timers import format_rfc3339

moment = datetime(2024, 3, 5, 7, 8, 9, tzinfo=timezone(timedelta(hours=-3, minutes=-30)))
print(format_rfc3339(moment))  # 2024-03-05T07:08:09-03:30
```

`format_rfc3339` drops fractions of a second. When the offset is unknown it
writes the time as UTC with the offset `-00:00`, as RFC 3339 prescribes:

- a `datetime` with no time zone is taken to already be in UTC and gets `-00:00`;
- a `datetime` whose offset is not a whole number of minutes is converted to
  UTC and gets `-00:00`.

Passing anything other than a `datetime` raises `TypeError`.

## What this package does not do

It only reads clocks and formats timestamps. It does not register or run
benchmarks, choose iteration counts, compute statistics over repetitions, or
write console, JSON or CSV reports; a harness built on these functions has to
do that itself.

## Running the tests

```
pip install -e ".[test]"
pytest
```