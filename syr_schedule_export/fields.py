"""
Parse individual text cells of the class schedule page into typed values.

Cell formats as rendered by PeopleSoft:
- Status:    "Enrolled", "Dropped", ...
- Mode:      "P" (in person), "O" (online), "H" (hybrid)
- Schedule:  "MoWeFr 2:00PM - 3:20PM" or "TBA"
- Dates:     "01/18/2022 - 05/05/2022"
- Title:     "CIS 600 - Topics in Computing"
"""
from __future__ import annotations

import re
from datetime import date, time
from typing import Optional

from .errors import FieldFormatError
from .model import (
    DateRange,
    Determined,
    Dropped,
    Enrolled,
    Hybrid,
    InPerson,
    Mode,
    Online,
    OtherMode,
    OtherStatus,
    Schedule,
    Status,
    Tba,
    Unparseable,
)

# PeopleSoft renders visually empty cells as a lone non-breaking space.
NBSP = "\u00a0"

# ASCII hyphen or en dash, whichever the page used for a range.
_RANGE_SEP = re.compile(r"[-–]")

_TIME_RE = re.compile(r"^ ?(\d{1,2}):(\d{2})(AM|PM|am|pm)$")

_MODE_CODES = {
    "P": InPerson(),
    "O": Online(),
    "H": Hybrid(),
}


def clean_optional(text: str | None) -> str | None:
    """Trim a cell; empty cells and the NBSP placeholder become None."""
    if text is None:
        return None
    t = text.strip()
    if not t or t == NBSP:
        return None
    return t


def parse_status(text: str) -> Status:
    t = text.strip()
    if t == "Enrolled":
        return Enrolled()
    if t == "Dropped":
        return Dropped()
    return OtherStatus(t)


def parse_mode(text: str) -> Mode:
    t = text.strip()
    return _MODE_CODES.get(t, OtherMode(t))


def parse_time(text: str) -> time:
    """
    Parse a 12-hour clock token such as '2:00PM' or ' 2:00PM' (PeopleSoft
    pads single-digit hours with a space).
    """
    m = _TIME_RE.match(text)
    if not m:
        raise FieldFormatError("time", text)
    h, mm, ap = m.groups()
    hour = int(h)
    minute = int(mm)
    if not 1 <= hour <= 12 or minute > 59:
        raise FieldFormatError("time", text, "out of range")
    if ap.upper() == "AM":
        if hour == 12:
            hour = 0
    elif hour != 12:
        hour += 12
    return time(hour, minute)


def parse_date(text: str) -> date:
    """Parse 'MM/DD/YYYY' into a date."""
    parts = text.split("/")
    if len(parts) != 3 or not all(p.isdecimal() for p in parts):
        raise FieldFormatError("date", text)
    month, day, year = (int(p) for p in parts)
    try:
        return date(year, month, day)
    except ValueError as e:
        raise FieldFormatError("date", text, str(e)) from e


def parse_date_range(text: str) -> DateRange:
    """
    Parse '01/18/2022 - 05/05/2022'.

    The range is split on the first hyphen (or en dash); whitespace around
    both halves is ignored, so '01/18/2022-05/05/2022' is accepted too.
    """
    parts = _RANGE_SEP.split(text.strip(), maxsplit=1)
    if len(parts) != 2:
        raise FieldFormatError("dates", text, "missing '-' between dates")
    start, end = (p.strip() for p in parts)
    try:
        return DateRange(start=parse_date(start), end=parse_date(end))
    except FieldFormatError as e:
        raise FieldFormatError("dates", text, str(e)) from e


def parse_schedule(text: str, strict: bool = False) -> Schedule:
    """
    Parse the meeting pattern cell.

    'TBA' -> Tba. Otherwise '<days> <start> - <end>', e.g.
    'MoWeFr 2:00PM - 3:20PM'. The page occasionally puts free text into this
    cell; with ``strict=False`` such text is kept as ``Unparseable`` and
    the row still builds, with ``strict=True`` it raises FieldFormatError.
    """
    t = text.strip()
    if t == "TBA":
        return Tba()
    try:
        days, sep, time_range = t.partition(" ")
        if not sep or not days:
            raise FieldFormatError("schedule", text, "missing days")
        bounds = _RANGE_SEP.split(time_range, maxsplit=1)
        if len(bounds) != 2:
            raise FieldFormatError("schedule", text, "missing '-' between times")
        start = parse_time(bounds[0].strip())
        end = parse_time(bounds[1].strip())
    except FieldFormatError as e:
        if strict:
            if e.field == "schedule":
                raise
            raise FieldFormatError("schedule", text, str(e)) from e
        return Unparseable(text)
    return Determined(days=days.strip(), start=start, end=end)


def parse_title(text: str) -> tuple[str, int, str]:
    """Split 'CIS 600 - Topic' into ('CIS', 600, 'Topic')."""
    subj_code, sep, title = text.strip().partition(" - ")
    if not sep:
        raise FieldFormatError("title", text)
    subject, sep, code = subj_code.strip().partition(" ")
    if not sep:
        raise FieldFormatError("title", text, "bad subject & code")
    code = code.strip()
    if not code.isdecimal() or int(code) <= 0:
        raise FieldFormatError("title", text, "bad course code")
    return subject, int(code), title


def parse_class_number(text: str | None) -> Optional[int]:
    t = clean_optional(text)
    if t is None:
        return None
    if not t.isdecimal():
        raise FieldFormatError("class number", text or "")
    return int(t)
