"""Settings router.

Calendar preferences: year, cycle anchor (group or manual start date),
holiday overlay and shift colors.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from shiftcal.database import get_db
from shiftcal.models.calendar_settings import CalendarSettings
from shiftcal.schemas.settings import CalendarSettingsResponse, CalendarSettingsUpdate
from shiftcal.services.calendar_service import cycle_anchor, get_or_create_settings
from shiftcal.services.shift_colors import (
    DEFAULT_SHIFT_COLORS,
    merge_with_defaults,
    text_color_for_background,
)

router = APIRouter(prefix="/settings", tags=["Settings"])


def _to_response(row: CalendarSettings) -> CalendarSettingsResponse:
    colors = {
        shift: {
            **pair,
            "light_text": text_color_for_background(pair["light"]),
            "dark_text": text_color_for_background(pair["dark"]),
        }
        for shift, pair in merge_with_defaults(row.shift_colors).items()
    }
    return CalendarSettingsResponse(
        year=row.year,
        anchor_mode=row.anchor_mode,
        group=row.group,
        manual_date=row.manual_date,
        anchor=cycle_anchor(row),
        show_holidays=row.show_holidays,
        week_starts_on_monday=row.week_starts_on_monday,
        shift_colors=colors,
    )


@router.get("/", response_model=CalendarSettingsResponse)
async def get_settings(db: Annotated[AsyncSession, Depends(get_db)]):
    """Return the calendar settings, creating defaults on first use."""
    row = await get_or_create_settings(db)
    return _to_response(row)


@router.put("/", response_model=CalendarSettingsResponse)
async def update_settings(
    body: CalendarSettingsUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Update only the fields present in the request body."""
    row = await get_or_create_settings(db)
    update_data = body.model_dump(exclude_unset=True, exclude={"shift_colors"})
    for field, value in update_data.items():
        if value is None and field != "manual_date":
            continue
        setattr(row, field, value)

    if body.shift_colors is not None:
        colors = merge_with_defaults(row.shift_colors)
        for shift, pair in body.shift_colors.items():
            colors[shift.value] = pair.model_dump()
        row.shift_colors = colors

    await db.flush()
    await db.refresh(row)
    return _to_response(row)


@router.post("/reset-colors", response_model=CalendarSettingsResponse)
async def reset_colors(db: Annotated[AsyncSession, Depends(get_db)]):
    """Restore the default shift colors."""
    row = await get_or_create_settings(db)
    row.shift_colors = {shift: dict(pair) for shift, pair in DEFAULT_SHIFT_COLORS.items()}
    await db.flush()
    await db.refresh(row)
    return _to_response(row)
