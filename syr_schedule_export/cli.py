"""
Command-line interface: fetch the Syracuse class schedule and export to file.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .config import ExportOptions
from .enrollment_html import parse_enrollment_html
from .events import generate_events
from .export import export
from .fetch import fetch_schedule_html, fetch_schedule_html_interactive
from .records import build_courses
from .tz import TZ_NY


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="syr-schedule-export",
        description=(
            "Export the Syracuse MySlice class schedule to ICS / CSV / JSON.\n"
            "Read a saved 'My Class Schedule' (List View) page, or fetch it with "
            "the SESSION_ID / TOKEN cookies or a browser login."
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-o",
        "--output",
        default="syr_schedule",
        help="Output path (without extension). Default: syr_schedule",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["ics", "csv", "json"],
        default="ics",
        help="Export format. Default: ics",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--html",
        metavar="HTML_PATH",
        help="Use a saved 'My Class Schedule' HTML file. No login required.",
    )
    mode.add_argument(
        "--fetch",
        action="store_true",
        help="Fetch the page with the SESSION_ID and TOKEN cookies from the environment.",
    )
    mode.add_argument(
        "--fetch-browser",
        action="store_true",
        help="Open Chrome, log in by hand, then press Enter in the terminal to export.",
    )
    parser.add_argument(
        "--save-html",
        metavar="PATH",
        help="(Fetch modes) Also save the fetched page to PATH for later --html runs.",
    )
    parser.add_argument(
        "--enrolled-only",
        action="store_true",
        help="Only export courses with status 'Enrolled' (dropped/wait-listed courses are skipped).",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Treat a schedule cell that is neither 'TBA' nor '<days> <start> - <end>' as an error for that class.",
    )
    parser.add_argument(
        "--timezone",
        default=TZ_NY,
        help=f"Timezone of the class times. Default: {TZ_NY}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Also log classes that produce no event.",
    )
    return parser


def _load_html(args) -> str:
    if args.html:
        p = Path(args.html)
        if not p.exists():
            raise ValueError(f"--html not found: {p}")
        return p.read_text(encoding="utf-8", errors="ignore")

    if args.fetch:
        print("Fetching class schedule...")
        html = fetch_schedule_html()
    else:
        html = fetch_schedule_html_interactive()

    if args.save_html:
        Path(args.save_html).write_text(html, encoding="utf-8")
        print(f"Saved page to {args.save_html}")
    return html


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not (args.html or args.fetch or args.fetch_browser):
        print(
            "No mode specified. Use --html for a saved page, --fetch for cookie "
            "fetch, or --fetch-browser to log in from a browser.",
            file=sys.stderr,
        )
        return 1

    options = ExportOptions(
        enrolled_only=args.enrolled_only,
        strict_schedule=args.strict,
        timezone=args.timezone,
    )

    try:
        html = _load_html(args)
    except Exception as e:
        print(f"Error getting class schedule: {e}", file=sys.stderr)
        return 1

    try:
        raw_courses = parse_enrollment_html(html_content=html)
    except ValueError as e:
        print(f"Error parsing class schedule HTML: {e}", file=sys.stderr)
        return 1

    courses = build_courses(raw_courses, strict=options.strict_schedule)
    events = generate_events(courses, options)

    ext = {"ics": ".ics", "csv": ".csv", "json": ".json"}[args.format]
    out_path = Path(args.output).with_suffix(ext) if Path(args.output).suffix else Path(args.output + ext)
    export(events, out_path, args.format, options)
    print(f"Exported {len(events)} event(s) from {len(courses)} course(s) to {out_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
