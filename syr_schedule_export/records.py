"""
Build Course / Class records from the raw text cells of the schedule page.

Input bundles come from ``enrollment_html.extract_raw_courses`` (or any
other source of the same cells). A missing cell is ``None``; a present
cell is its text, untrimmed.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .errors import MissingFieldError, ScheduleExportError
from .fields import (
    clean_optional,
    parse_class_number,
    parse_date_range,
    parse_mode,
    parse_schedule,
    parse_status,
    parse_title,
)
from .model import Class, Course, CourseMeta

logger = logging.getLogger(__name__)


@dataclass
class RawClass:
    """Text of one meeting-pattern row."""

    class_number: Optional[str] = None
    section: Optional[str] = None
    schedule: Optional[str] = None
    location: Optional[str] = None
    mode: Optional[str] = None
    instructor: Optional[str] = None
    dates: Optional[str] = None


@dataclass
class RawCourse:
    """Text of one course block: its header plus its meeting rows."""

    title: Optional[str] = None
    status: Optional[str] = None
    classes: List[RawClass] = field(default_factory=list)


def _require(value: Optional[str], name: str) -> str:
    if value is None:
        raise MissingFieldError(name)
    return value


def build_class(raw: RawClass, strict: bool = False) -> Class:
    """Build one Class; raises ScheduleExportError on a missing or bad cell."""
    number = parse_class_number(raw.class_number)
    section = clean_optional(raw.section)
    instructor = _require(raw.instructor, "instructor")
    location = _require(clean_optional(raw.location), "location")
    schedule = parse_schedule(_require(raw.schedule, "schedule"), strict=strict)
    mode = parse_mode(_require(raw.mode, "mode"))
    dates = parse_date_range(_require(raw.dates, "dates"))
    return Class(
        number=number,
        section=section,
        schedule=schedule,
        location=location,
        mode=mode,
        instructor=instructor,
        dates=dates,
    )


def build_course(raw: RawCourse, strict: bool = False) -> Course:
    """
    Build a Course and every class row that parses.

    ``meta.class_num`` counts the rows found under the course, including
    rows that are dropped, so a section suffix still appears when one of
    two sections fails to parse.
    """
    subject, code, title = parse_title(_require(raw.title, "title"))
    status = parse_status(_require(raw.status, "status"))
    meta = CourseMeta(status=status, subject=subject, code=code, title=title)

    classes: List[Class] = []
    for idx, raw_class in enumerate(raw.classes):
        meta.add_class_num()
        try:
            classes.append(build_class(raw_class, strict=strict))
        except ScheduleExportError as e:
            logger.warning(
                "Skipping class row %d of %s %d: %s", idx + 1, subject, code, e
            )
    return Course(meta=meta, classes=classes)


def build_courses(raws: Iterable[RawCourse], strict: bool = False) -> List[Course]:
    """Build every course block; a block whose header fails is skipped."""
    courses: List[Course] = []
    for idx, raw in enumerate(raws):
        try:
            courses.append(build_course(raw, strict=strict))
        except ScheduleExportError as e:
            logger.warning("Skipping course block %d (%r): %s", idx + 1, raw.title, e)
    return courses
