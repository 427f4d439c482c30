"""Test locale-aware number and currency formatting."""
from homelogger.international.number_formatting import format_number, format_currency


class TestFormatNumber:
    def test_en_us_grouping(self, make_settings):
        assert format_number(1234567.891, make_settings(locale="en-US")) == "1,234,567.891"

    def test_de_de_separators(self, make_settings):
        assert format_number(1234.5, make_settings(locale="de-DE")) == "1.234,5"

    def test_non_finite_passthrough(self, default_settings):
        assert format_number(float("nan"), default_settings) == "nan"
        assert format_number(float("inf"), default_settings) == "inf"

    def test_unknown_locale_falls_back(self, make_settings):
        assert format_number(1234.5, make_settings(locale="xx-YY")) == "1,234.5"

    def test_unsupported_numbering_system_falls_back(self, make_settings):
        assert format_number(1234.5, make_settings(numbering_system="bogus")) == "1,234.5"


class TestFormatCurrency:
    def test_usd(self, default_settings):
        assert format_currency(1234.5, default_settings) == "$1,234.50"

    def test_gbp(self, make_settings):
        assert format_currency(1234.5, make_settings(locale="en-GB", currency="GBP")) == "£1,234.50"

    def test_eur_in_german(self, make_settings):
        result = format_currency(1234.5, make_settings(locale="de-DE", currency="EUR"))
        assert "1.234,50" in result
        assert "€" in result

    def test_empty_currency_defaults_to_usd(self, make_settings):
        assert format_currency(10, make_settings(currency="")) == "$10.00"

    def test_non_finite_passthrough(self, default_settings):
        assert format_currency(float("-inf"), default_settings) == "-inf"
