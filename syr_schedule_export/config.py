"""
Run options shared by the event builder, the exporter and the CLI.
"""
from __future__ import annotations

from dataclasses import dataclass

from .tz import TZ_NY

# Environment variables holding the PeopleSoft session cookies.
SESSION_ID_ENV = "SESSION_ID"
TOKEN_ENV = "TOKEN"


@dataclass(frozen=True)
class ExportOptions:
    """
    :param enrolled_only: Only emit events for courses whose status is
        'Enrolled'. Off by default: dropped and wait-listed courses are
        exported too.
    :param strict_schedule: Reject a class row whose schedule cell is
        neither 'TBA' nor '<days> <start> - <end>' instead of keeping it
        as an unparseable (event-less) class.
    :param timezone: IANA name of the institution's timezone.
    :param calendar_name: X-WR-CALNAME of the exported calendar.
    """

    enrolled_only: bool = False
    strict_schedule: bool = False
    timezone: str = TZ_NY
    calendar_name: str = "Syracuse Class Schedule"
