"""
Data model shared by the parsers, the record builder and the exporter.

Status, Mode and Schedule are closed sets of variants; the ``Other`` and
``Unparseable`` variants keep the upstream text so unknown values are
reported as-is instead of being guessed.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import List, Optional, Union


# ──────────────────────────────────────────────────────────────────
#  Status
# ──────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Enrolled:
    def is_enrolled(self) -> bool:
        return True


@dataclass(frozen=True)
class Dropped:
    def is_enrolled(self) -> bool:
        return False


@dataclass(frozen=True)
class OtherStatus:
    raw: str

    def is_enrolled(self) -> bool:
        return False


Status = Union[Enrolled, Dropped, OtherStatus]


# ──────────────────────────────────────────────────────────────────
#  Instruction mode
# ──────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class InPerson:
    pass


@dataclass(frozen=True)
class Online:
    pass


@dataclass(frozen=True)
class Hybrid:
    pass


@dataclass(frozen=True)
class OtherMode:
    raw: str


Mode = Union[InPerson, Online, Hybrid, OtherMode]


# ──────────────────────────────────────────────────────────────────
#  Schedule
# ──────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Determined:
    """Weekday pattern (e.g. 'MoWeFr') plus a start/end time of day."""

    days: str
    start: time
    end: time


@dataclass(frozen=True)
class Tba:
    pass


@dataclass(frozen=True)
class Unparseable:
    raw: str


Schedule = Union[Determined, Tba, Unparseable]


# ──────────────────────────────────────────────────────────────────
#  Records
# ──────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class DateRange:
    """Inclusive first/last day of one meeting pattern."""

    start: date
    end: date


@dataclass
class CourseMeta:
    status: Status
    subject: str
    code: int
    title: str
    class_num: int = 0

    def add_class_num(self) -> None:
        self.class_num += 1


@dataclass(frozen=True)
class Class:
    """One meeting pattern (row) of a course."""

    number: Optional[int]
    section: Optional[str]
    schedule: Schedule
    location: str
    mode: Mode
    instructor: str
    dates: DateRange


@dataclass
class Course:
    meta: CourseMeta
    classes: List[Class] = field(default_factory=list)


@dataclass(frozen=True)
class CalendarEvent:
    """
    One recurring event, ready for the ICS exporter.

    ``start``/``end`` are aware datetimes holding the institution's wall
    clock time; they are not converted to UTC so the calendar client can
    expand the RRULE across daylight-saving changes.
    """

    summary: str
    start: datetime
    end: datetime
    location: str
    description: str
    rrule: str
    status: str = "CONFIRMED"
    visibility: str = "PUBLIC"
