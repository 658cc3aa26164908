"""
Export calendar events to ICS, CSV, and JSON.
"""
from __future__ import annotations

import csv
import hashlib
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List

import icalendar

from .config import ExportOptions
from .model import CalendarEvent

CSV_FIELDS = [
    "summary",
    "description",
    "location",
    "start",
    "end",
    "timezone",
    "rrule",
    "status",
    "visibility",
]


def _event_uid(ev: CalendarEvent) -> str:
    # Deterministic so re-imports update instead of duplicating
    uid_string = f"{ev.summary}-{ev.start.isoformat()}-{ev.rrule}"
    uid_hash = hashlib.md5(uid_string.encode("utf-8")).hexdigest()
    return f"{uid_hash}@syr-schedule-export"


def build_calendar(
    events: List[CalendarEvent], options: ExportOptions | None = None
) -> icalendar.Calendar:
    options = options or ExportOptions()
    cal = icalendar.Calendar()
    cal.add("prodid", "-//Syracuse Schedule Export//EN")
    cal.add("version", "2.0")
    cal.add("calscale", "GREGORIAN")
    cal.add("x-wr-calname", options.calendar_name)
    cal.add("x-wr-timezone", options.timezone)

    for ev in events:
        event = icalendar.Event()
        event.add("uid", _event_uid(ev))
        event.add("dtstamp", datetime.now(timezone.utc))
        event.add("summary", ev.summary)
        event.add("description", ev.description)
        event.add("location", ev.location)
        event.add("status", ev.status)
        event.add("class", ev.visibility)
        event.add("dtstart", ev.start)
        event.add("dtend", ev.end)
        event.add("rrule", icalendar.vRecur.from_ical(ev.rrule))
        cal.add_component(event)
    return cal


def export_ics(
    events: List[CalendarEvent],
    out_path: str | Path,
    options: ExportOptions | None = None,
) -> None:
    """Export events to iCalendar (.ics) for Google/Apple/Outlook calendar."""
    cal = build_calendar(events, options)
    Path(out_path).write_bytes(cal.to_ical())


def _event_record(ev: CalendarEvent) -> Dict[str, str]:
    return {
        "summary": ev.summary,
        "description": ev.description,
        "location": ev.location,
        "start": ev.start.isoformat(),
        "end": ev.end.isoformat(),
        "timezone": str(ev.start.tzinfo),
        "rrule": ev.rrule,
        "status": ev.status,
        "visibility": ev.visibility,
    }


def export_csv(events: List[CalendarEvent], out_path: str | Path) -> None:
    """Export events to CSV."""
    with open(out_path, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        w.writeheader()
        w.writerows(_event_record(ev) for ev in events)


def export_json(events: List[CalendarEvent], out_path: str | Path) -> None:
    """Export events to JSON."""
    Path(out_path).write_text(
        json.dumps([_event_record(ev) for ev in events], indent=2, ensure_ascii=False),
        encoding="utf-8",
    )


def export(
    events: List[CalendarEvent],
    out_path: str | Path,
    fmt: str,
    options: ExportOptions | None = None,
) -> None:
    """Export to the given format: ics, csv, or json."""
    fmt = fmt.lower()
    if fmt == "ics":
        export_ics(events, out_path, options)
    elif fmt == "csv":
        export_csv(events, out_path)
    elif fmt == "json":
        export_json(events, out_path)
    else:
        raise ValueError(f"Unsupported format: {fmt}. Use ics, csv, or json.")
