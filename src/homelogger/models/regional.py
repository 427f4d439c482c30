"""Regional settings value objects shared by the service, the provider and the formatters.

``RegionalSettings`` is immutable: every formatting call receives one explicitly
and nothing mutates it in place. Updates produce a new validated instance via
:func:`apply_update`.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ..international.date_patterns import SUPPORTED_PATTERNS
from ..international.locale_resolution import is_known_time_zone

MEASUREMENT_SYSTEMS = ("imperial", "metric")
WEEK_START_OPTIONS = (0, 1, 6)


class RegionalSettings(BaseModel):
    """User-configurable regional formatting preferences.

    Serialised with camelCase keys (``timeZone``, ``dateFormat`` ...) to match
    the settings service wire format; attributes are snake_case.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    locale: str = "en-US"
    language: str = "en"
    currency: str = "USD"
    time_zone: str = "UTC"
    measurement_system: str = "metric"
    week_start: int = 0
    date_format: str = "YYYY-MM-DD"
    numbering_system: str = "latn"

    @field_validator("measurement_system")
    @classmethod
    def _check_measurement_system(cls, value: str) -> str:
        if value not in MEASUREMENT_SYSTEMS:
            raise ValueError("measurementSystem must be 'imperial' or 'metric'")
        return value

    @field_validator("week_start")
    @classmethod
    def _check_week_start(cls, value: int) -> int:
        if value < 0 or value > 6:
            raise ValueError("weekStart must be between 0 and 6")
        return value

    @field_validator("time_zone")
    @classmethod
    def _check_time_zone(cls, value: str) -> str:
        # Empty means UTC
        if value and not is_known_time_zone(value):
            raise ValueError(f"timeZone '{value}' is not a known IANA time zone")
        return value

    @classmethod
    def from_partial(cls, data: dict[str, Any]) -> RegionalSettings:
        """Merge a (possibly partial) wire payload over the defaults.

        Raises ``ValueError`` if *data* is not a JSON object.
        """
        if not isinstance(data, dict):
            raise ValueError(f"settings payload must be an object, got {type(data).__name__}")
        merged = cls().model_dump(by_alias=True)
        merged.update({k: v for k, v in data.items() if v is not None})
        return cls.model_validate(merged)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class SettingsUpdate(BaseModel):
    """Partial update body for ``PUT /settings``; absent fields are left alone."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    locale: str | None = None
    language: str | None = None
    currency: str | None = None
    time_zone: str | None = None
    measurement_system: str | None = None
    week_start: int | None = None
    date_format: str | None = None
    numbering_system: str | None = None


def apply_update(current: RegionalSettings, update: SettingsUpdate) -> RegionalSettings:
    """Return a new validated ``RegionalSettings`` with *update* applied.

    Raises ``pydantic.ValidationError`` if the result violates a constraint.
    """
    changes = update.model_dump(exclude_unset=True, exclude_none=True)
    return RegionalSettings.model_validate({**current.model_dump(), **changes})


class SettingsOptions(BaseModel):
    """Choices offered by the settings form."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    locales: list[str] = Field(default_factory=lambda: ["en-US", "en-ZA", "en-GB"])
    languages: list[str] = Field(default_factory=lambda: ["en"])
    currencies: list[str] = Field(
        default_factory=lambda: ["USD", "EUR", "GBP", "CAD", "AUD", "JPY", "ZAR"]
    )
    time_zones: list[str] = Field(
        default_factory=lambda: [
            "UTC",
            "America/New_York",
            "America/Chicago",
            "America/Denver",
            "America/Los_Angeles",
            "Europe/London",
            "Europe/Berlin",
            "Asia/Tokyo",
            "Australia/Sydney",
        ]
    )
    measurement_systems: list[str] = Field(default_factory=lambda: list(MEASUREMENT_SYSTEMS))
    week_start_options: list[int] = Field(default_factory=lambda: list(WEEK_START_OPTIONS))
    date_formats: list[str] = Field(default_factory=lambda: list(SUPPORTED_PATTERNS))
    numbering_systems: list[str] = Field(default_factory=lambda: ["latn"])
