"""
Build the weekly RRULE for a class meeting pattern.

RRULE looks like:

    FREQ=WEEKLY;INTERVAL=1;UNTIL=20220506T035959Z;BYDAY=MO,WE,FR
"""
from __future__ import annotations

from datetime import time

import pytz

from .errors import RecurrenceBuildError
from .model import DateRange, Determined, Schedule
from .tz import TZ_NY, utc_stamp

_BYDAY_CODES = {"MO", "TU", "WE", "TH", "FR", "SA", "SU"}

# Last second of the term's final day, local time.
_END_OF_DAY = time(23, 59, 59)


def format_weekday(days: str) -> str:
    """'MoWeFr' -> 'MO,WE,FR'."""
    upper = days.upper()
    return ",".join(upper[i:i + 2] for i in range(0, len(upper), 2))


def build_rrule(schedule: Schedule, dates: DateRange, tz_name: str = TZ_NY) -> str | None:
    """
    Return the RRULE value for a determined schedule, or None when the
    schedule is TBA or unparseable.
    """
    if not isinstance(schedule, Determined):
        return None

    byday = format_weekday(schedule.days)
    bad = [d for d in byday.split(",") if d not in _BYDAY_CODES]
    if bad:
        raise RecurrenceBuildError(schedule.days, f"unknown weekday code(s) {', '.join(bad)}")

    try:
        until = utc_stamp(dates.end, _END_OF_DAY, tz_name)
    except pytz.UnknownTimeZoneError as e:
        raise RecurrenceBuildError(schedule.days, f"unknown timezone {tz_name}") from e

    return f"FREQ=WEEKLY;INTERVAL=1;UNTIL={until};BYDAY={byday}"
