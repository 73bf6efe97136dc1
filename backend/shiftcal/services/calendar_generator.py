"""Calendar Generator.

Projects the shift cycle, the user's annotations, birthdays and public
holidays onto every day of a year.  The output owns nothing: callers
rebuild it from a fresh snapshot after any change.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType

from shiftcal.services.event_store import Birthday, EventAnnotation
from shiftcal.services.shift_cycle import Shift, require_anchor, shift_for, to_date_key
from shiftcal.services.vacation import date_range


@dataclass(frozen=True)
class DayRecord:
    day: date
    shift: Shift
    event: EventAnnotation | None = None
    holiday: str | None = None
    birthday: str | None = None

    @property
    def date_key(self) -> str:
        return to_date_key(self.day)


@dataclass(frozen=True)
class CalendarSnapshot:
    """Everything a calendar year depends on, frozen at one point in time."""

    year: int
    anchor: date | None
    events: Mapping[str, EventAnnotation] = field(default_factory=dict)
    holidays: Mapping[str, str] = field(default_factory=dict)
    birthdays: tuple[Birthday, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "events", MappingProxyType(dict(self.events)))
        object.__setattr__(self, "holidays", MappingProxyType(dict(self.holidays)))
        object.__setattr__(self, "birthdays", tuple(self.birthdays))


def generate(
    year: int,
    anchor: date | None,
    events: Mapping[str, EventAnnotation],
    holidays: Mapping[str, str],
    birthdays: Iterable[Birthday],
) -> list[DayRecord]:
    """Build one record per day from Jan 1 to Dec 31 of ``year``.

    Raises:
        ConfigurationError: If no cycle anchor is configured.
    """
    anchor = require_anchor(anchor)
    names_by_day = {(b.month, b.day): b.name for b in birthdays}

    records: list[DayRecord] = []
    for day in date_range(date(year, 1, 1), date(year, 12, 31)):
        date_key = to_date_key(day)
        records.append(
            DayRecord(
                day=day,
                shift=shift_for(day, anchor),
                event=events.get(date_key),
                holiday=holidays.get(date_key),
                birthday=names_by_day.get((day.month - 1, day.day)),
            )
        )
    return records


def regenerate(snapshot: CalendarSnapshot) -> list[DayRecord]:
    """Rebuild the full year from ``snapshot``."""
    return generate(
        snapshot.year,
        snapshot.anchor,
        snapshot.events,
        snapshot.holidays,
        snapshot.birthdays,
    )
