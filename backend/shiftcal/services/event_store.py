"""Event Store.

Immutable snapshot of the user's day annotations and birthdays.  Every
mutation returns a new store; the old one is left untouched so a
generated calendar never observes a half-applied change.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from datetime import date
from types import MappingProxyType

from shiftcal.services.shift_cycle import Shift, parse_date_key, shift_for


@dataclass(frozen=True)
class EventAnnotation:
    note: str = ""
    has_vacation: bool = False  # a colleague is on vacation
    colleagues: tuple[str, ...] = ()
    is_afz: bool = False
    is_personal_vacation: bool = False

    def is_empty(self) -> bool:
        return not (
            self.note.strip()
            or self.has_vacation
            or self.is_afz
            or self.is_personal_vacation
        )

    def clamped_to(self, shift: Shift) -> "EventAnnotation":
        """Drop the fields that only apply to working days."""
        if shift is not Shift.OFF:
            return self
        return replace(self, has_vacation=False, colleagues=(), is_afz=False)


@dataclass(frozen=True)
class Birthday:
    month: int  # 0-11
    day: int
    name: str


@dataclass(frozen=True)
class StoreDiff:
    """Entries to write and date-keys to delete to go from one store to another."""

    upserted: dict[str, EventAnnotation] = field(default_factory=dict)
    removed: tuple[str, ...] = ()
    birthdays_saved: tuple[Birthday, ...] = ()
    birthdays_removed: tuple[tuple[int, int], ...] = ()

    def __bool__(self) -> bool:
        return bool(
            self.upserted or self.removed or self.birthdays_saved or self.birthdays_removed
        )


class EventStore:
    def __init__(
        self,
        events: Mapping[str, EventAnnotation] | None = None,
        birthdays: Iterable[Birthday] = (),
    ):
        self._events = MappingProxyType(dict(events or {}))
        self._birthdays = tuple(birthdays)

    @property
    def events(self) -> Mapping[str, EventAnnotation]:
        return self._events

    @property
    def birthdays(self) -> tuple[Birthday, ...]:
        return self._birthdays

    def __len__(self) -> int:
        return len(self._events)

    def __contains__(self, date_key: str) -> bool:
        return date_key in self._events

    def get(self, date_key: str) -> EventAnnotation | None:
        return self._events.get(date_key)

    def _with_events(self, events: dict[str, EventAnnotation]) -> "EventStore":
        return EventStore(events, self._birthdays)

    # -- Annotations ----------------------------------------------------------

    def upsert(self, date_key: str, annotation: EventAnnotation) -> "EventStore":
        """Store ``annotation`` under ``date_key``, or delete the key when it is empty."""
        parse_date_key(date_key)
        events = dict(self._events)
        if annotation.is_empty():
            events.pop(date_key, None)
        else:
            events[date_key] = annotation
        return self._with_events(events)

    def remove(self, date_key: str) -> "EventStore":
        events = dict(self._events)
        events.pop(date_key, None)
        return self._with_events(events)

    def save_day(
        self,
        date_key: str,
        annotation: EventAnnotation,
        shift: Shift,
    ) -> "EventStore":
        """Save the day editor's fields for one date.

        Colleague names are trimmed and blanks dropped, working-day-only
        fields are cleared on ``Off`` days, and the personal vacation flag
        of an existing entry is kept since the day editor does not edit it.
        """
        existing = self._events.get(date_key)
        annotation = replace(
            annotation,
            colleagues=tuple(c.strip() for c in annotation.colleagues if c.strip()),
            is_personal_vacation=existing.is_personal_vacation if existing else False,
        )
        return self.upsert(date_key, annotation.clamped_to(shift))

    @staticmethod
    def lookup_shift(day: date, anchor: date | None) -> Shift:
        """Shift for ``day``; ``Off`` when no anchor is configured so list views still render."""
        if anchor is None:
            return Shift.OFF
        return shift_for(day, anchor)

    # -- Birthdays ------------------------------------------------------------

    def birthday_on(self, month: int, day: int) -> Birthday | None:
        for birthday in self._birthdays:
            if birthday.month == month and birthday.day == day:
                return birthday
        return None

    def save_birthday(self, birthday: Birthday) -> "EventStore":
        """Replace the birthday sharing (month, day), otherwise append."""
        birthdays = list(self._birthdays)
        for index, existing in enumerate(birthdays):
            if existing.month == birthday.month and existing.day == birthday.day:
                birthdays[index] = birthday
                break
        else:
            birthdays.append(birthday)
        return EventStore(self._events, birthdays)

    def delete_birthday(self, month: int, day: int) -> "EventStore":
        birthdays = [b for b in self._birthdays if b.month != month or b.day != day]
        return EventStore(self._events, birthdays)

    # -- Persistence helpers --------------------------------------------------

    def diff(self, newer: "EventStore") -> StoreDiff:
        upserted = {
            key: annotation
            for key, annotation in newer.events.items()
            if self._events.get(key) != annotation
        }
        removed = tuple(key for key in self._events if key not in newer.events)
        newer_days = {(b.month, b.day) for b in newer.birthdays}
        return StoreDiff(
            upserted=upserted,
            removed=removed,
            birthdays_saved=tuple(b for b in newer.birthdays if b not in self._birthdays),
            birthdays_removed=tuple(
                (b.month, b.day) for b in self._birthdays if (b.month, b.day) not in newer_days
            ),
        )
