"""Calendar router.

Generates a full calendar year and resolves single-day shifts.
"""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from shiftcal.database import get_db
from shiftcal.schemas.calendar import CalendarResponse, DayRecordResponse, ShiftResponse
from shiftcal.schemas.event import EventData
from shiftcal.services.calendar_generator import DayRecord, regenerate
from shiftcal.services.calendar_service import cycle_anchor, get_or_create_settings, load_snapshot
from shiftcal.services.event_store import EventStore
from shiftcal.services.shift_cycle import require_anchor

router = APIRouter(tags=["Calendar"])


def _event_data(record: DayRecord) -> EventData | None:
    if record.event is None:
        return None
    return EventData(
        note=record.event.note,
        has_vacation=record.event.has_vacation,
        colleagues=list(record.event.colleagues),
        is_afz=record.event.is_afz,
        is_personal_vacation=record.event.is_personal_vacation,
    )


@router.get("/calendar", response_model=CalendarResponse)
async def get_calendar(
    db: Annotated[AsyncSession, Depends(get_db)],
    year: int | None = Query(None, ge=1900, le=2200, description="Defaults to the configured year"),
):
    """Generate every day of the year with shift, entry, holiday and birthday."""
    snapshot = await load_snapshot(db, year)
    anchor = require_anchor(snapshot.anchor)
    records = regenerate(snapshot)
    return CalendarResponse(
        year=snapshot.year,
        anchor=anchor,
        days=[
            DayRecordResponse(
                date=record.day,
                shift=record.shift,
                event=_event_data(record),
                holiday=record.holiday,
                birthday=record.birthday,
            )
            for record in records
        ],
    )


@router.get("/shifts/{day}", response_model=ShiftResponse)
async def get_shift(
    day: date,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Resolve the shift for one day; ``Frei`` when no anchor is configured."""
    row = await get_or_create_settings(db)
    anchor = cycle_anchor(row)
    return ShiftResponse(date=day, shift=EventStore.lookup_shift(day, anchor), anchor=anchor)
