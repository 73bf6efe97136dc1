"""Vacations router.

Marks and clears personal vacation over date ranges and lists the
resulting vacation blocks.
"""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from shiftcal.database import get_db
from shiftcal.schemas.vacation import VacationBlockResponse, VacationRange
from shiftcal.services.calendar_service import (
    cycle_anchor,
    get_or_create_settings,
    load_store,
    persist_store,
)
from shiftcal.services.vacation import VacationBlock, apply_range, group_into_blocks, remove_range

router = APIRouter(prefix="/vacations", tags=["Vacations"])


def _to_response(blocks: list[VacationBlock]) -> list[VacationBlockResponse]:
    return [VacationBlockResponse(start=b.start, end=b.end, days=b.days) for b in blocks]


@router.get("/", response_model=list[VacationBlockResponse])
async def list_vacation_blocks(
    db: Annotated[AsyncSession, Depends(get_db)],
    year: int | None = Query(None, ge=1900, le=2200, description="Defaults to the configured year"),
):
    """Personal vacation of one year as contiguous blocks."""
    row = await get_or_create_settings(db)
    store = await load_store(db)
    return _to_response(group_into_blocks(store.events, year or row.year))


@router.post("/", response_model=list[VacationBlockResponse], status_code=status.HTTP_201_CREATED)
async def add_vacation(
    body: VacationRange,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Flag every working day in the range as personal vacation.

    Days off are skipped.  Returns the vacation blocks of every year the
    range touches.
    """
    anchor = cycle_anchor(await get_or_create_settings(db))
    store = await load_store(db)
    updated = apply_range(store, body.start, body.end, anchor)
    await persist_store(db, store, updated)
    blocks = [
        block
        for year in range(body.start.year, body.end.year + 1)
        for block in group_into_blocks(updated.events, year)
    ]
    return _to_response(blocks)


@router.delete("/", status_code=status.HTTP_204_NO_CONTENT)
async def delete_vacation(
    db: Annotated[AsyncSession, Depends(get_db)],
    start: date = Query(..., description="First day of the block (inclusive)"),
    end: date = Query(..., description="Last day of the block (inclusive)"),
):
    """Clear personal vacation in the range; entries left empty are deleted."""
    store = await load_store(db)
    await persist_store(db, store, remove_range(store, start, end))
    return None
