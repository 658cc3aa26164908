"""
Errors raised while turning scraped schedule text into records and events.

Each one is scoped to a single class row or course block; callers catch
``ScheduleExportError`` per item and keep going with the siblings.
"""
from __future__ import annotations


class ScheduleExportError(Exception):
    """Base class for per-record failures."""


class FieldFormatError(ScheduleExportError):
    """A present field whose text does not match its expected format."""

    def __init__(self, field: str, raw: str, reason: str = "") -> None:
        self.field = field
        self.raw = raw
        self.reason = reason
        msg = f"Bad {field} format: {raw!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class MissingFieldError(ScheduleExportError):
    """A required field that is absent from the source row."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Failed to find {field}")


class RecurrenceBuildError(ScheduleExportError):
    """A determined schedule that still could not become an RRULE."""

    def __init__(self, raw: str, reason: str) -> None:
        self.raw = raw
        self.reason = reason
        super().__init__(f"Failed to build recurrence for {raw!r}: {reason}")
