"""Regional settings API routes."""
from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError

from ...models.regional import SettingsOptions, SettingsUpdate, apply_update
from ...storage.database import get_session
from ...storage.repositories import SettingsRepo

logger = structlog.get_logger(__name__)

router = APIRouter()


def _describe(exc: ValidationError) -> str:
    """Flatten validator messages into one line, without pydantic's prefixes."""
    messages = []
    for err in exc.errors():
        ctx_error = (err.get("ctx") or {}).get("error")
        messages.append(str(ctx_error) if ctx_error is not None else err["msg"])
    return "; ".join(messages)


@router.get("")
async def get_settings(session=Depends(get_session)):
    """Return the stored settings, creating the defaults on first access."""
    repo = SettingsRepo(session)
    settings = await repo.get()
    await session.commit()
    return settings.to_wire()


@router.put("")
async def update_settings(update: SettingsUpdate, session=Depends(get_session)):
    """Apply a partial update. Fields missing from the body keep their value."""
    repo = SettingsRepo(session)
    current = await repo.get()
    try:
        updated = apply_update(current, update)
    except ValidationError as e:
        detail = _describe(e)
        logger.info("settings_update_rejected", detail=detail)
        raise HTTPException(status_code=400, detail=detail)

    saved = await repo.save(updated)
    await session.commit()
    logger.info("settings_updated", fields=sorted(update.model_dump(exclude_unset=True)))
    return saved.to_wire()


@router.get("/options")
async def get_settings_options():
    """Choices offered by the settings form."""
    return SettingsOptions().model_dump(by_alias=True)
