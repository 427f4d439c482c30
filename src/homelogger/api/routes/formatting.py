"""Format/parse preview endpoints backed by the stored regional settings."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ...international.date_formatting import (
    format_date,
    format_date_time,
    get_date_pattern,
    validate_date_input,
)
from ...storage.database import get_session
from ...storage.repositories import SettingsRepo

router = APIRouter()


class FormatRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    value: str
    include_time: bool = False


class ParseRequest(BaseModel):
    value: str


@router.post("/date")
async def format_date_preview(body: FormatRequest, session=Depends(get_session)):
    """Render a canonical date or timestamp the way the UI would show it."""
    settings = await SettingsRepo(session).get()
    formatter = format_date_time if body.include_time else format_date
    return {
        "value": body.value,
        "display": formatter(body.value, settings),
        "pattern": get_date_pattern(settings),
    }


@router.post("/parse")
async def parse_date_preview(body: ParseRequest, session=Depends(get_session)):
    """Normalise user input to ``YYYY-MM-DD``; ``error`` explains a rejection."""
    settings = await SettingsRepo(session).get()
    canonical, error = validate_date_input(body.value, settings)
    return {
        "value": body.value,
        "canonical": canonical,
        "error": error,
        "pattern": get_date_pattern(settings),
    }
