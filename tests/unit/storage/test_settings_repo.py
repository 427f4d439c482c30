"""Test the settings repository against an in-memory SQLite database."""
import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from homelogger.models.regional import RegionalSettings
from homelogger.storage.models import Base, SettingsRecord
from homelogger.storage.repositories import SettingsRepo


async def _make_engine():
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    return engine


class TestSettingsRepo:
    @pytest.mark.asyncio
    async def test_get_creates_defaults_once(self):
        engine = await _make_engine()
        try:
            factory = async_sessionmaker(engine, expire_on_commit=False)
            async with factory() as session:
                repo = SettingsRepo(session)
                assert await repo.get() == RegionalSettings()
                assert await repo.get() == RegionalSettings()
                await session.commit()

                count = await session.scalar(select(func.count()).select_from(SettingsRecord))
                assert count == 1
        finally:
            await engine.dispose()

    @pytest.mark.asyncio
    async def test_save_persists_across_sessions(self):
        engine = await _make_engine()
        try:
            factory = async_sessionmaker(engine, expire_on_commit=False)
            updated = RegionalSettings(
                locale="en-GB", currency="GBP", time_zone="Europe/London",
                week_start=1, date_format="DD/MM/YYYY",
            )
            async with factory() as session:
                saved = await SettingsRepo(session).save(updated)
                await session.commit()
            assert saved == updated

            async with factory() as session:
                assert await SettingsRepo(session).get() == updated
        finally:
            await engine.dispose()
