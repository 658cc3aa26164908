"""
Turn Course records into recurring CalendarEvents.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .config import ExportOptions
from .errors import ScheduleExportError
from .model import CalendarEvent, Class, Course, CourseMeta, Determined
from .recurrence import build_rrule
from .tz import localize

logger = logging.getLogger(__name__)


def event_summary(cls: Class, meta: CourseMeta) -> str:
    """'CIS 600', or 'CIS 600 M' when the course has several rows."""
    summary = f"{meta.subject} {meta.code}"
    if meta.class_num > 1 and cls.section:
        summary += f" {cls.section}"
    return summary


def class_to_event(
    cls: Class,
    meta: CourseMeta,
    options: ExportOptions | None = None,
) -> Optional[CalendarEvent]:
    """
    Build the event for one class row, or None when the row has no
    determined schedule or is filtered out by ``options.enrolled_only``.
    """
    options = options or ExportOptions()

    rrule = build_rrule(cls.schedule, cls.dates, options.timezone)
    if rrule is None:
        return None

    if options.enrolled_only and not meta.status.is_enrolled():
        return None

    schedule = cls.schedule
    assert isinstance(schedule, Determined)

    start_date = cls.dates.start
    return CalendarEvent(
        summary=event_summary(cls, meta),
        start=localize(start_date, schedule.start, options.timezone),
        end=localize(start_date, schedule.end, options.timezone),
        location=cls.location,
        description=f"{meta.title} given by {cls.instructor}",
        rrule=rrule,
    )


def generate_events(
    courses: Iterable[Course],
    options: ExportOptions | None = None,
) -> List[CalendarEvent]:
    """Events for every class of every course, in page order."""
    options = options or ExportOptions()
    events: List[CalendarEvent] = []
    for course in courses:
        meta = course.meta
        for cls in course.classes:
            try:
                event = class_to_event(cls, meta, options)
            except ScheduleExportError as e:
                logger.warning(
                    "Skipping %s %d section %s: %s",
                    meta.subject, meta.code, cls.section or "-", e,
                )
                continue
            if event is None:
                logger.debug(
                    "No event for %s %d section %s (%r)",
                    meta.subject, meta.code, cls.section or "-", cls.schedule,
                )
                continue
            events.append(event)
    return events
