#!/usr/bin/env python3
"""Show how a date renders and parses under the service's current regional settings."""
import sys

# Load .env file
from dotenv import load_dotenv
load_dotenv()

from homelogger.client.settings_provider import SettingsProvider, SettingsServiceError
from homelogger.international.date_formatting import (
    format_date,
    format_date_time,
    get_date_pattern,
    parse_date_input,
)
from homelogger.international.number_formatting import format_currency, format_number


def main(value: str) -> None:
    with SettingsProvider.from_config() as provider:
        try:
            settings = provider.refresh()
        except SettingsServiceError as e:
            print(f"Error: {e}")
            sys.exit(1)

    print(f"Locale: {settings.locale}  Time zone: {settings.time_zone}")
    print(f"Date format: {settings.date_format or '(auto)'}  Pattern shown: {get_date_pattern(settings)}")
    print("-" * 50)

    display = format_date(value, settings)
    print(f"Display:       {display}")
    print(f"With time:     {format_date_time(value, settings)}")
    print(f"Parsed back:   {parse_date_input(display, settings)}")
    print(f"Number:        {format_number(1234567.891, settings)}")
    print(f"Currency:      {format_currency(1234.5, settings)}")


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python scripts/preview_formats.py <date, e.g. 2024-07-04>")
        sys.exit(1)

    main(sys.argv[1])
