"""SQLAlchemy ORM models for the regional settings service."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from ..models.regional import RegionalSettings


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class SettingsRecord(Base):
    """The single row holding the household's regional settings."""

    __tablename__ = "settings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    locale: Mapped[str] = mapped_column(String(35), default="en-US")
    language: Mapped[str] = mapped_column(String(35), default="en")
    currency: Mapped[str] = mapped_column(String(3), default="USD")
    time_zone: Mapped[str] = mapped_column(String(64), default="UTC")
    measurement_system: Mapped[str] = mapped_column(String(16), default="metric")  # imperial, metric
    week_start: Mapped[int] = mapped_column(Integer, default=0)  # 0=Sunday, 1=Monday, 6=Saturday
    date_format: Mapped[str] = mapped_column(String(64), default="YYYY-MM-DD")
    numbering_system: Mapped[str] = mapped_column(String(16), default="latn")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)

    @classmethod
    def from_regional(cls, settings: RegionalSettings) -> SettingsRecord:
        return cls(**settings.model_dump())

    def to_regional(self) -> RegionalSettings:
        return RegionalSettings(
            locale=self.locale,
            language=self.language,
            currency=self.currency,
            time_zone=self.time_zone,
            measurement_system=self.measurement_system,
            week_start=self.week_start,
            date_format=self.date_format,
            numbering_system=self.numbering_system,
        )

    def apply(self, settings: RegionalSettings) -> None:
        for field, value in settings.model_dump().items():
            setattr(self, field, value)
