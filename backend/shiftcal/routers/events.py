"""Events router.

Day entries: notes, colleague vacation, AFZ and the personal vacation
flag, keyed by ``YYYY-MM-DD``.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from shiftcal.database import get_db
from shiftcal.schemas.event import (
    EventData,
    EventItem,
    EventOverviewResponse,
    EventResponse,
    EventUpdate,
    MonthOverview,
    VacationBlockItem,
)
from shiftcal.services.calendar_service import (
    cycle_anchor,
    get_or_create_settings,
    load_store,
    persist_store,
)
from shiftcal.services.event_overview import EntryItem, build_overview
from shiftcal.services.event_store import EventAnnotation, EventStore
from shiftcal.services.shift_cycle import parse_date_key

router = APIRouter(prefix="/events", tags=["Events"])


def _event_data(annotation: EventAnnotation) -> EventData:
    return EventData(
        note=annotation.note,
        has_vacation=annotation.has_vacation,
        colleagues=list(annotation.colleagues),
        is_afz=annotation.is_afz,
        is_personal_vacation=annotation.is_personal_vacation,
    )


def _to_response(date_key: str, annotation: EventAnnotation, anchor) -> EventResponse:
    day = parse_date_key(date_key)
    return EventResponse(
        date=day,
        shift=EventStore.lookup_shift(day, anchor),
        **_event_data(annotation).model_dump(),
    )


@router.get("/", response_model=list[EventResponse])
async def list_events(
    db: Annotated[AsyncSession, Depends(get_db)],
    year: int | None = Query(None, ge=1900, le=2200, description="Only entries of this year"),
):
    """List stored entries in date order."""
    anchor = cycle_anchor(await get_or_create_settings(db))
    store = await load_store(db)
    return [
        _to_response(date_key, annotation, anchor)
        for date_key, annotation in sorted(store.events.items())
        if year is None or date_key.startswith(f"{year:04d}-")
    ]


@router.get("/overview", response_model=EventOverviewResponse)
async def get_overview(
    db: Annotated[AsyncSession, Depends(get_db)],
    year: int | None = Query(None, ge=1900, le=2200, description="Defaults to the configured year"),
    include_birthdays: bool = Query(False),
):
    """Entries of one year grouped by month, vacation days collapsed into blocks."""
    row = await get_or_create_settings(db)
    year = year or row.year
    store = await load_store(db)

    months = []
    for month in build_overview(store, year, cycle_anchor(row), include_birthdays):
        items = []
        for item in month.items:
            if isinstance(item, EntryItem):
                items.append(EventItem(
                    date=item.day,
                    shift=item.shift,
                    event=_event_data(item.event) if item.event else None,
                    birthday=item.birthday,
                ))
            else:
                items.append(VacationBlockItem(start=item.start, end=item.end, days=item.days))
        months.append(MonthOverview(month=month.month, items=items))
    return EventOverviewResponse(year=year, months=months)


@router.get("/{date_key}", response_model=EventResponse)
async def get_event(
    date_key: str,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    parse_date_key(date_key)
    store = await load_store(db)
    annotation = store.get(date_key)
    if annotation is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No entry for this date",
        )
    anchor = cycle_anchor(await get_or_create_settings(db))
    return _to_response(date_key, annotation, anchor)


@router.put(
    "/{date_key}",
    response_model=EventResponse,
    responses={204: {"description": "Entry was empty and has been removed"}},
)
async def save_event(
    date_key: str,
    body: EventUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Save the day editor for one date.

    On days off, colleague vacation and AFZ are cleared.  An entry left
    without content is deleted and 204 is returned.
    """
    day = parse_date_key(date_key)
    anchor = cycle_anchor(await get_or_create_settings(db))
    store = await load_store(db)

    updated = store.save_day(
        date_key,
        EventAnnotation(
            note=body.note,
            has_vacation=body.has_vacation,
            colleagues=tuple(body.colleagues),
            is_afz=body.is_afz,
        ),
        EventStore.lookup_shift(day, anchor),
    )
    await persist_store(db, store, updated)

    annotation = updated.get(date_key)
    if annotation is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return _to_response(date_key, annotation, anchor)


@router.delete("/{date_key}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(
    date_key: str,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Remove the entry for one date, including its vacation flag."""
    parse_date_key(date_key)
    store = await load_store(db)
    await persist_store(db, store, store.remove(date_key))
    return None
