"""Test the fixed date pattern registry."""
from homelogger.international.date_patterns import DATE_PATTERNS, SUPPORTED_PATTERNS, lookup_pattern


class TestRegistry:
    def test_priority_order(self):
        assert SUPPORTED_PATTERNS == (
            "YYYY-MM-DD", "YYYY/MM/DD", "DD/MM/YYYY", "MM/DD/YYYY", "DD-MM-YYYY", "MM-DD-YYYY",
        )

    def test_lookup_case_insensitive(self):
        assert lookup_pattern("dd/mm/yyyy") is DATE_PATTERNS["DD/MM/YYYY"]

    def test_lookup_unknown(self):
        assert lookup_pattern("DD.MM.YYYY") is None
        assert lookup_pattern("auto") is None


class TestFieldExtraction:
    def test_day_first(self):
        assert DATE_PATTERNS["DD/MM/YYYY"].match("15/03/2024") == (2024, 3, 15)

    def test_month_first(self):
        assert DATE_PATTERNS["MM/DD/YYYY"].match("03/15/2024") == (2024, 3, 15)

    def test_year_first(self):
        assert DATE_PATTERNS["YYYY/MM/DD"].match("2024/03/15") == (2024, 3, 15)

    def test_no_calendar_validation_at_match_time(self):
        assert DATE_PATTERNS["MM-DD-YYYY"].match("02-30-2024") == (2024, 2, 30)

    def test_must_match_whole_string(self):
        assert DATE_PATTERNS["DD/MM/YYYY"].match("15/03/2024 extra") is None
        assert DATE_PATTERNS["DD/MM/YYYY"].match("15/03/24") is None

    def test_ascii_digits_only(self):
        assert DATE_PATTERNS["DD/MM/YYYY"].match("٠٤/٠٧/٢٠٢٤") is None
        assert DATE_PATTERNS["YYYY-MM-DD"].match("２０２４-０７-０４") is None
