"""Calendar Service.

Loads the persisted settings and user data into the immutable core
types, and writes the difference back after a core operation.
"""

import logging
from datetime import date, datetime, timezone

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from shiftcal.config import settings
from shiftcal.models.birthday import BirthdayEntry
from shiftcal.models.calendar_settings import SETTINGS_ROW_ID, CalendarSettings
from shiftcal.models.day_event import DayEvent
from shiftcal.services.calendar_generator import CalendarSnapshot
from shiftcal.services.event_store import Birthday, EventAnnotation, EventStore
from shiftcal.services.holiday_service import get_holidays
from shiftcal.services.shift_colors import DEFAULT_SHIFT_COLORS
from shiftcal.services.shift_cycle import resolve_anchor

logger = logging.getLogger(__name__)


async def get_or_create_settings(db: AsyncSession) -> CalendarSettings:
    """Return the settings row, creating it with defaults on first access."""
    result = await db.execute(
        select(CalendarSettings).where(CalendarSettings.id == SETTINGS_ROW_ID)
    )
    row = result.scalar_one_or_none()
    if row is not None:
        return row

    row = CalendarSettings(
        id=SETTINGS_ROW_ID,
        year=datetime.now(timezone.utc).year,
        anchor_mode="group",
        group=settings.DEFAULT_GROUP,
        manual_date=None,
        show_holidays=False,
        week_starts_on_monday=True,
        shift_colors={shift: dict(pair) for shift, pair in DEFAULT_SHIFT_COLORS.items()},
    )
    db.add(row)
    await db.flush()
    return row


def cycle_anchor(row: CalendarSettings) -> date | None:
    return resolve_anchor(row.anchor_mode, row.group, row.manual_date)


def _to_annotation(event: DayEvent) -> EventAnnotation:
    return EventAnnotation(
        note=event.note or "",
        has_vacation=bool(event.has_vacation),
        colleagues=tuple(event.colleagues or ()),
        is_afz=bool(event.is_afz),
        is_personal_vacation=bool(event.is_personal_vacation),
    )


async def load_store(db: AsyncSession) -> EventStore:
    events_result = await db.execute(select(DayEvent))
    birthdays_result = await db.execute(
        select(BirthdayEntry).order_by(BirthdayEntry.created_at, BirthdayEntry.month, BirthdayEntry.day)
    )
    return EventStore(
        {e.date_key: _to_annotation(e) for e in events_result.scalars().all()},
        [Birthday(month=b.month, day=b.day, name=b.name) for b in birthdays_result.scalars().all()],
    )


async def persist_store(db: AsyncSession, before: EventStore, after: EventStore) -> None:
    """Write the changes between two stores to the database."""
    diff = before.diff(after)
    if not diff:
        return

    if diff.removed:
        await db.execute(delete(DayEvent).where(DayEvent.date_key.in_(diff.removed)))

    for date_key, annotation in diff.upserted.items():
        event = await db.get(DayEvent, date_key)
        if event is None:
            event = DayEvent(date_key=date_key)
            db.add(event)
        event.note = annotation.note
        event.has_vacation = annotation.has_vacation
        event.colleagues = list(annotation.colleagues)
        event.is_afz = annotation.is_afz
        event.is_personal_vacation = annotation.is_personal_vacation

    for month, day in diff.birthdays_removed:
        await db.execute(
            delete(BirthdayEntry).where(BirthdayEntry.month == month, BirthdayEntry.day == day)
        )

    for birthday in diff.birthdays_saved:
        result = await db.execute(
            select(BirthdayEntry).where(
                BirthdayEntry.month == birthday.month,
                BirthdayEntry.day == birthday.day,
            )
        )
        entry = result.scalar_one_or_none()
        if entry is None:
            db.add(BirthdayEntry(month=birthday.month, day=birthday.day, name=birthday.name))
        else:
            entry.name = birthday.name

    await db.flush()
    logger.debug(
        "Store persisted: %d upserted, %d removed, %d birthdays saved, %d birthdays removed",
        len(diff.upserted), len(diff.removed),
        len(diff.birthdays_saved), len(diff.birthdays_removed),
    )


async def load_snapshot(db: AsyncSession, year: int | None = None) -> CalendarSnapshot:
    """Collect everything needed to generate one calendar year."""
    row = await get_or_create_settings(db)
    year = year or row.year
    store = await load_store(db)
    holidays = await get_holidays(db, year) if row.show_holidays else {}
    return CalendarSnapshot(
        year=year,
        anchor=cycle_anchor(row),
        events=store.events,
        holidays=holidays,
        birthdays=store.birthdays,
    )
