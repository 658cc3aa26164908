"""
Wall-clock to timezone-aware conversions for the institution's timezone.
"""
from __future__ import annotations

from datetime import date, datetime, time

import pytz

# Syracuse University
TZ_NY = "America/New_York"

UTC_STAMP_FORMAT = "%Y%m%dT%H%M%SZ"


def localize(day: date, at: time, tz_name: str = TZ_NY) -> datetime:
    """Attach ``tz_name`` to a local date + time; the wall clock is kept."""
    tz = pytz.timezone(tz_name)
    return tz.localize(datetime.combine(day, at))


def utc_stamp(day: date, at: time, tz_name: str = TZ_NY) -> str:
    """Local date + time in ``tz_name`` as a compact UTC stamp, e.g. 20220506T035959Z."""
    return localize(day, at, tz_name).astimezone(pytz.utc).strftime(UTC_STAMP_FORMAT)
