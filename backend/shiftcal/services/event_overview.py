"""Entry list ("Meine Einträge").

Merges vacation blocks, annotated days and, on request, the year's
birthdays into one date-sorted list grouped by month.
"""

from dataclasses import dataclass, field
from datetime import date

from shiftcal.services.event_store import EventAnnotation, EventStore
from shiftcal.services.shift_cycle import Shift, parse_date_key, to_date_key
from shiftcal.services.vacation import VacationBlock, group_into_blocks


@dataclass(frozen=True)
class EntryItem:
    day: date
    shift: Shift
    event: EventAnnotation | None = None
    birthday: str | None = None


@dataclass(frozen=True)
class MonthEntries:
    month: int  # 1-12
    items: list[EntryItem | VacationBlock] = field(default_factory=list)


def _sort_day(item: EntryItem | VacationBlock) -> date:
    return item.start if isinstance(item, VacationBlock) else item.day


def build_overview(
    store: EventStore,
    year: int,
    anchor: date | None,
    include_birthdays: bool = False,
) -> list[MonthEntries]:
    """Group the entries of ``year`` by month, oldest first."""
    items: list[EntryItem | VacationBlock] = list(group_into_blocks(store.events, year))

    birthdays: dict[str, str] = {}
    if include_birthdays:
        for birthday in store.birthdays:
            try:
                day = date(year, birthday.month + 1, birthday.day)
            except ValueError:
                # 29 Feb outside leap years
                continue
            birthdays[to_date_key(day)] = birthday.name

    keys = {
        key
        for key, annotation in store.events.items()
        if not annotation.is_personal_vacation and not annotation.is_empty()
    }
    keys.update(birthdays)

    for key in keys:
        day = parse_date_key(key)
        if day.year != year:
            continue
        event = store.get(key)
        if event is not None and event.is_personal_vacation:
            # shown as part of its vacation block
            event = None
        items.append(
            EntryItem(
                day=day,
                shift=store.lookup_shift(day, anchor),
                event=event,
                birthday=birthdays.get(key),
            )
        )

    items.sort(key=_sort_day)

    months: dict[int, MonthEntries] = {}
    for item in items:
        month = _sort_day(item).month
        months.setdefault(month, MonthEntries(month=month)).items.append(item)
    return [months[m] for m in sorted(months)]
