"""Tests for fields.py – single-cell parsers."""
import pytest
from datetime import date, time

from syr_schedule_export.errors import FieldFormatError
from syr_schedule_export.fields import (
    clean_optional,
    parse_class_number,
    parse_date,
    parse_date_range,
    parse_mode,
    parse_schedule,
    parse_status,
    parse_time,
    parse_title,
)
from syr_schedule_export.model import (
    DateRange,
    Determined,
    Dropped,
    Enrolled,
    Hybrid,
    InPerson,
    Online,
    OtherMode,
    OtherStatus,
    Tba,
    Unparseable,
)


class TestParseStatus:
    def test_known(self):
        assert parse_status("Enrolled") == Enrolled()
        assert parse_status("Dropped") == Dropped()
        assert parse_status("Enrolled").is_enrolled()
        assert not parse_status("Dropped").is_enrolled()

    def test_other_keeps_text(self):
        s = parse_status("Waiting")
        assert s == OtherStatus("Waiting")
        assert not s.is_enrolled()


class TestParseMode:
    def test_codes(self):
        assert parse_mode("P") == InPerson()
        assert parse_mode("O") == Online()
        assert parse_mode("H") == Hybrid()

    def test_other_keeps_text(self):
        assert parse_mode("Independent Study") == OtherMode("Independent Study")


class TestParseTime:
    def test_pm(self):
        assert parse_time("2:00PM") == time(14, 0)
        assert parse_time("3:20PM") == time(15, 20)

    def test_leading_space(self):
        assert parse_time(" 2:00PM") == time(14, 0)

    def test_am_and_noon(self):
        assert parse_time("9:30AM") == time(9, 30)
        assert parse_time("12:45PM") == time(12, 45)
        assert parse_time("12:10AM") == time(0, 10)

    @pytest.mark.parametrize("text", ["14:00", "2:00", "2PM", "13:00PM", "2:75PM", "", "TBA"])
    def test_bad_shape(self, text):
        with pytest.raises(FieldFormatError) as exc:
            parse_time(text)
        assert exc.value.raw == text


class TestParseDate:
    def test_valid(self):
        assert parse_date("05/03/2022") == date(2022, 5, 3)

    def test_invalid_calendar_date(self):
        with pytest.raises(FieldFormatError):
            parse_date("02/30/2022")

    @pytest.mark.parametrize("text", ["2022-05-03", "05/03", "05/03/2022/1", "ab/03/2022", ""])
    def test_bad_shape(self, text):
        with pytest.raises(FieldFormatError):
            parse_date(text)


class TestParseDateRange:
    def test_spaced(self):
        assert parse_date_range("01/18/2022 - 05/05/2022") == DateRange(
            date(2022, 1, 18), date(2022, 5, 5)
        )

    def test_unspaced_and_padded(self):
        assert parse_date_range("  01/18/2022-05/05/2022 ") == DateRange(
            date(2022, 1, 18), date(2022, 5, 5)
        )

    def test_en_dash(self):
        assert parse_date_range("01/18/2022 – 05/05/2022").end == date(2022, 5, 5)

    def test_missing_delimiter(self):
        with pytest.raises(FieldFormatError) as exc:
            parse_date_range("01/18/2022 05/05/2022")
        assert exc.value.field == "dates"

    def test_bad_half(self):
        with pytest.raises(FieldFormatError) as exc:
            parse_date_range("01/18/2022 - 02/30/2022")
        assert exc.value.raw == "01/18/2022 - 02/30/2022"


class TestParseSchedule:
    def test_determined(self):
        assert parse_schedule("MoWeFr 2:00PM - 3:20PM") == Determined(
            days="MoWeFr", start=time(14, 0), end=time(15, 20)
        )

    def test_tba(self):
        assert parse_schedule("TBA") == Tba()

    def test_fallback_keeps_raw(self):
        assert parse_schedule("Arranged with instructor") == Unparseable("Arranged with instructor")
        assert parse_schedule("TuTh") == Unparseable("TuTh")

    def test_strict_raises(self):
        with pytest.raises(FieldFormatError) as exc:
            parse_schedule("TuTh 9:30 - 10:50", strict=True)
        assert exc.value.field == "schedule"
        assert exc.value.raw == "TuTh 9:30 - 10:50"

    def test_strict_still_accepts_tba(self):
        assert parse_schedule("TBA", strict=True) == Tba()


class TestParseTitle:
    def test_valid(self):
        assert parse_title("CIS 600 - Topic") == ("CIS", 600, "Topic")

    def test_title_with_dash(self):
        assert parse_title(" ECS 102 - Intro - Lab ") == ("ECS", 102, "Intro - Lab")

    @pytest.mark.parametrize("text", ["CIS 600 Topic", "CIS600 - Topic", "CIS ABC - Topic", "CIS 0 - Topic"])
    def test_bad(self, text):
        with pytest.raises(FieldFormatError):
            parse_title(text)


class TestOptionalCells:
    def test_clean_optional(self):
        assert clean_optional(None) is None
        assert clean_optional("") is None
        assert clean_optional("   ") is None
        assert clean_optional("\u00a0") is None
        assert clean_optional(" M001 ") == "M001"

    def test_class_number(self):
        assert parse_class_number("31522") == 31522
        assert parse_class_number("\u00a0") is None
        assert parse_class_number(None) is None
        with pytest.raises(FieldFormatError):
            parse_class_number("12a")
