import pytest


def _class_row(idx, nbr, section, sched, loc, mode, instr, dates):
    return f"""
    <tr id="trCLASS_MTG_VW${idx}_row1">
      <td><div id="win0divDERIVED_CLS_DTL_CLASS_NBR${idx}">
        <span class="PSHYPERLINKDISABLED" id="DERIVED_CLS_DTL_CLASS_NBR${idx}">{nbr}</span>
      </div></td>
      <td><div id="win0divMTG_SECTION${idx}"><span id="MTG_SECTION${idx}">{section}</span></div></td>
      <td><div id="win0divINSTRUCTION_MODE${idx}"><span id="INSTRUCTION_MODE${idx}">{mode}</span></div></td>
      <td><div id="win0divMTG_SCHED${idx}"><span id="MTG_SCHED${idx}">{sched}</span></div></td>
      <td><div id="win0divMTG_LOC${idx}"><span id="MTG_LOC${idx}">{loc}</span></div></td>
      <td><div id="win0divDERIVED_CLS_DTL_SSR_INSTR_LONG${idx}">
        <span id="DERIVED_CLS_DTL_SSR_INSTR_LONG${idx}">{instr}</span>
      </div></td>
      <td><div id="win0divMTG_DATES${idx}"><span id="MTG_DATES${idx}">{dates}</span></div></td>
    </tr>"""


def _course_block(n, title, status, rows):
    return f"""
    <div id="win0divDERIVED_REGFRM1_DESCR20${n}">
    <table class="PSGROUPBOXWBO">
      <tr><td class="PAGROUPDIVIDER">{title}</td></tr>
      <tr><td>
        <table><tr><td><div id="win0divSTATUS${n}"><span id="STATUS${n}">{status}</span></div></td></tr></table>
        <table>{''.join(rows)}</table>
      </td></tr>
    </table>
    </div>"""


@pytest.fixture
def schedule_html():
    """Minimal 'My Class Schedule' list view with two courses."""
    cis = _course_block(
        0,
        "CIS 600 - Topic",
        "Enrolled",
        [
            _class_row(0, "31522", "M001", "MoWeFr 2:00PM - 3:20PM", "Room 101", "P", "Jane Doe",
                       "01/18/2022 - 05/05/2022"),
        ],
    )
    mat = _course_block(
        1,
        "MAT 295 - Calculus I",
        "Dropped",
        [
            _class_row(1, "40001", "M002", "TuTh 9:30AM - 10:50AM", "Carnegie 114", "P", "John Roe",
                       "01/18/2022 - 05/05/2022"),
            _class_row(2, "&nbsp;", "&nbsp;", "TBA", "TBA", "O", "Staff",
                       "01/18/2022 - 05/05/2022"),
        ],
    )
    return f"<html><body><form>{cis}{mat}</form></body></html>"
