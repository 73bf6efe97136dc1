"""Holidays router.

Public holidays of the configured state, cached from the holiday API.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from shiftcal.config import settings
from shiftcal.database import get_db
from shiftcal.schemas.holiday import HolidaySyncRequest, HolidaysResponse
from shiftcal.services.holiday_service import get_holidays, sync_holidays_to_db

router = APIRouter(prefix="/holidays", tags=["Holidays"])


@router.get("/{year}", response_model=HolidaysResponse)
async def list_holidays(
    year: Annotated[int, Path(ge=1900, le=2200)],
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Holidays of ``year``; empty when the holiday API is unreachable."""
    holidays = await get_holidays(db, year)
    return HolidaysResponse(
        year=year,
        subdivision=settings.HOLIDAY_SUBDIVISION,
        holidays=holidays,
    )


@router.post("/sync", response_model=HolidaysResponse)
async def sync_holidays(
    body: HolidaySyncRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Refetch holidays from the API and replace the cached ones."""
    subdivision = body.subdivision or settings.HOLIDAY_SUBDIVISION
    holidays = await sync_holidays_to_db(db, body.year, subdivision)
    return HolidaysResponse(year=body.year, subdivision=subdivision, holidays=holidays)
