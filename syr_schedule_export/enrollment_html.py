"""
Extract raw course/class cells from the PeopleSoft "My Class Schedule"
(list view) page, saved from the browser or fetched with ``fetch.py``.

Page structure (element ids carry a '$<row>' suffix, so they are matched
with substring selectors):
- div#win0divDERIVED_REGFRM1_DESCR20$N > table: one per course.
  - first <td>: "CIS 600 - Topics in Computing"
  - span#STATUS$N: "Enrolled"
  - tr#trCLASS_MTG_VW$N_row...: one per meeting pattern, with
    DERIVED_CLS_DTL_CLASS_NBR, MTG_SECTION, MTG_SCHED, MTG_LOC,
    INSTRUCTION_MODE, DERIVED_CLS_DTL_SSR_INSTR_LONG, MTG_DATES.
"""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from bs4 import BeautifulSoup, Tag  # type: ignore[import]

from .records import RawClass, RawCourse

COURSE_CONTAINER = 'div[id*="win0divDERIVED_REGFRM1_DESCR20"] > table'
TITLE_CELL = "tr > td"
CLASS_ROW = '[id*="trCLASS_MTG_VW"]'
STATUS_ID = "STATUS"

# RawClass attribute -> element id fragment
CLASS_FIELD_IDS = {
    "class_number": "DERIVED_CLS_DTL_CLASS_NBR",
    "section": "MTG_SECTION",
    "schedule": "MTG_SCHED",
    "location": "MTG_LOC",
    "mode": "INSTRUCTION_MODE",
    "instructor": "DERIVED_CLS_DTL_SSR_INSTR_LONG",
    "dates": "MTG_DATES",
}


def _has_content(s: str) -> bool:
    # Layout whitespace between wrapper divs is skipped; NBSP is cell content.
    return bool(s.strip(" \t\r\n"))


def _first_text(el: Optional[Tag]) -> Optional[str]:
    """First text node under ``el``, untrimmed; None if there is none."""
    if el is None:
        return None
    s = el.find(string=_has_content)
    return str(s) if s is not None else None


def _select_text(root: Tag, id_fragment: str) -> Optional[str]:
    return _first_text(root.select_one(f'[id*="{id_fragment}"]'))


def _parse_class_row(row: Tag) -> RawClass:
    cells = {name: _select_text(row, frag) for name, frag in CLASS_FIELD_IDS.items()}
    return RawClass(**cells)


def extract_raw_courses(soup: BeautifulSoup) -> List[RawCourse]:
    courses: List[RawCourse] = []
    for table in soup.select(COURSE_CONTAINER):
        courses.append(
            RawCourse(
                title=_first_text(table.select_one(TITLE_CELL)),
                status=_select_text(table, STATUS_ID),
                classes=[_parse_class_row(tr) for tr in table.select(CLASS_ROW)],
            )
        )
    return courses


def parse_enrollment_html(
    html_path: str | Path | None = None,
    html_content: str | None = None,
) -> List[RawCourse]:
    """
    Parse a saved class schedule page or an HTML string into raw bundles.

    :param html_path: Path to the HTML file saved from the browser.
    :param html_content: Raw HTML string (e.g. from fetch). Used when html_path is not provided.
    """
    if html_content is not None:
        html = html_content
    elif html_path is not None:
        html = Path(html_path).read_text(encoding="utf-8", errors="ignore")
    else:
        raise ValueError("Provide either html_path or html_content.")

    soup = BeautifulSoup(html, "html.parser")
    courses = extract_raw_courses(soup)
    if not courses:
        raise ValueError(
            "Could not find any course in the HTML. "
            "Make sure the page is 'My Class Schedule' in List View."
        )
    return courses
