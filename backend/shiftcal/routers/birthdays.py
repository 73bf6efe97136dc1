"""Birthdays router.

Yearly recurring birthdays, at most one per calendar day.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from shiftcal.database import get_db
from shiftcal.schemas.birthday import BirthdayCreate, BirthdayResponse
from shiftcal.services.calendar_service import load_store, persist_store
from shiftcal.services.event_store import Birthday

router = APIRouter(prefix="/birthdays", tags=["Birthdays"])


@router.get("/", response_model=list[BirthdayResponse])
async def list_birthdays(db: Annotated[AsyncSession, Depends(get_db)]):
    """List birthdays in calendar order."""
    store = await load_store(db)
    return sorted(store.birthdays, key=lambda b: (b.month, b.day))


@router.get("/{month}/{day}", response_model=BirthdayResponse)
async def get_birthday(
    db: Annotated[AsyncSession, Depends(get_db)],
    month: int = Path(..., ge=0, le=11),
    day: int = Path(..., ge=1, le=31),
):
    store = await load_store(db)
    birthday = store.birthday_on(month, day)
    if birthday is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No birthday on this day",
        )
    return birthday


@router.put("/", response_model=BirthdayResponse)
async def save_birthday(
    body: BirthdayCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Save a birthday, replacing any other one on the same day."""
    birthday = Birthday(month=body.month, day=body.day, name=body.name)
    store = await load_store(db)
    await persist_store(db, store, store.save_birthday(birthday))
    return birthday


@router.delete("/{month}/{day}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_birthday(
    db: Annotated[AsyncSession, Depends(get_db)],
    month: int = Path(..., ge=0, le=11),
    day: int = Path(..., ge=1, le=31),
):
    """Remove the birthday on this day; a missing one is not an error."""
    store = await load_store(db)
    await persist_store(db, store, store.delete_birthday(month, day))
    return None
