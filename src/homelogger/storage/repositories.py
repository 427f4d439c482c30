"""Async repository for the regional settings record."""

from __future__ import annotations

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from homelogger.models.regional import RegionalSettings
from homelogger.storage.models import SettingsRecord

logger = structlog.get_logger(__name__)


class SettingsRepo:
    """Read and write the single row of the ``settings`` table."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def ensure(self) -> SettingsRecord:
        """Return the settings row, inserting the defaults if the table is empty."""
        stmt = select(SettingsRecord).order_by(SettingsRecord.id).limit(1)
        result = await self._session.execute(stmt)
        record = result.scalar_one_or_none()
        if record is not None:
            return record

        record = SettingsRecord.from_regional(RegionalSettings())
        self._session.add(record)
        await self._session.flush()
        await self._session.refresh(record)
        logger.info("settings_defaults_created", settings_id=record.id)
        return record

    async def get(self) -> RegionalSettings:
        record = await self.ensure()
        return record.to_regional()

    async def save(self, settings: RegionalSettings) -> RegionalSettings:
        """Overwrite the stored settings. Caller commits."""
        record = await self.ensure()
        record.apply(settings)
        await self._session.flush()
        return record.to_regional()
