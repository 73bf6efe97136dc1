"""Vacation Block Reconciler.

Applies and removes the personal vacation flag over date ranges and
collapses flagged days into contiguous blocks for the entry list.
"""

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, replace
from datetime import date, datetime, time, timedelta

from shiftcal.core.exceptions import InvalidRangeError
from shiftcal.services.event_store import EventAnnotation, EventStore
from shiftcal.services.shift_cycle import (
    Shift,
    parse_date_key,
    require_anchor,
    shift_for,
    to_date_key,
)

logger = logging.getLogger(__name__)

# One calendar day plus an hour of slack for a daylight-saving switch at
# a block boundary.
MAX_BLOCK_GAP = timedelta(hours=25)


@dataclass(frozen=True)
class VacationBlock:
    start: date
    end: date

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1


def date_range(start: date, end: date) -> Iterator[date]:
    """Yield all dates between start and end (inclusive)."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def _check_range(start: date, end: date) -> None:
    if start > end:
        raise InvalidRangeError(
            f"End date {end.isoformat()} must not be before start date {start.isoformat()}"
        )


def apply_range(
    store: EventStore,
    start: date,
    end: date,
    anchor: date | None,
) -> EventStore:
    """Flag every working day in ``[start, end]`` as personal vacation.

    Days whose shift is ``Off`` are skipped.  Raises ``ConfigurationError``
    without an anchor and ``InvalidRangeError`` when ``end`` precedes
    ``start``; nothing is flagged in either case.
    """
    anchor = require_anchor(anchor)
    _check_range(start, end)

    events = dict(store.events)
    flagged = 0
    for day in date_range(start, end):
        if shift_for(day, anchor) is Shift.OFF:
            continue
        date_key = to_date_key(day)
        existing = events.get(date_key) or EventAnnotation()
        events[date_key] = replace(existing, is_personal_vacation=True)
        flagged += 1

    logger.info(
        "Vacation %s..%s: %d working days flagged", start.isoformat(), end.isoformat(), flagged,
    )
    return EventStore(events, store.birthdays)


def remove_range(store: EventStore, start: date, end: date) -> EventStore:
    """Clear the personal vacation flag in ``[start, end]``.

    Entries left without any content are deleted; notes and colleague
    markers on the other days are kept.
    """
    _check_range(start, end)

    result = store
    for day in date_range(start, end):
        date_key = to_date_key(day)
        existing = result.get(date_key)
        if existing is None or not existing.is_personal_vacation:
            continue
        result = result.upsert(date_key, replace(existing, is_personal_vacation=False))
    return result


def group_into_blocks(
    annotations: Mapping[str, EventAnnotation],
    year: int,
) -> list[VacationBlock]:
    """Collapse the personal vacation days of ``year`` into contiguous blocks."""
    days = sorted(
        day
        for day in (parse_date_key(key) for key, a in annotations.items() if a.is_personal_vacation)
        if day.year == year
    )
    if not days:
        return []

    blocks: list[VacationBlock] = []
    block_start = days[0]
    for current, following in zip(days, days[1:] + [None]):
        gap = (
            datetime.combine(following, time()) - datetime.combine(current, time())
            if following is not None
            else None
        )
        if gap is None or gap > MAX_BLOCK_GAP:
            blocks.append(VacationBlock(start=block_start, end=current))
            block_start = following
    return blocks
