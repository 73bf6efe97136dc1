"""Shift cycle engine.

Maps a civil date onto the fixed 35-day rotation of the 5-shift system.
Every group works the same pattern, shifted by one week per group.
"""

import enum
from datetime import date, datetime

from shiftcal.core.exceptions import ConfigurationError, InvalidDateKeyError


class Shift(str, enum.Enum):
    EARLY = "Früh"
    MIDDAY = "Mittag"
    NIGHT = "Nacht"
    OFF = "Frei"


# The two half-cycles differ in their early/night run lengths (4/4 vs 3/3).
SHIFT_CYCLE: tuple[Shift, ...] = (
    *[Shift.EARLY] * 4,
    Shift.OFF,
    *[Shift.MIDDAY] * 3,
    Shift.OFF,
    *[Shift.NIGHT] * 4,
    *[Shift.OFF] * 5,
    *[Shift.EARLY] * 3,
    Shift.OFF,
    *[Shift.MIDDAY] * 4,
    Shift.OFF,
    *[Shift.NIGHT] * 3,
    *[Shift.OFF] * 5,
)
CYCLE_LENGTH = len(SHIFT_CYCLE)

GROUP_REFERENCE_DATES: dict[str, date] = {
    "1": date(2025, 1, 30),
    "2": date(2025, 1, 23),
    "3": date(2025, 1, 16),
    "4": date(2025, 1, 9),
    "5": date(2025, 1, 2),
}

ANCHOR_MODES = ("group", "manual")


def _civil(value: date) -> date:
    # datetime is a subclass of date; drop the time of day
    if isinstance(value, datetime):
        return value.date()
    return value


def shift_for(day: date, anchor: date) -> Shift:
    """Return the shift worked on ``day`` for a cycle starting at ``anchor``."""
    offset = (_civil(day) - _civil(anchor)).days
    # Python's modulo is already non-negative for days before the anchor
    return SHIFT_CYCLE[offset % CYCLE_LENGTH]


def resolve_anchor(
    anchor_mode: str,
    group: str | None = None,
    manual_date: date | None = None,
) -> date | None:
    """Resolve the cycle anchor from the calendar settings.

    Returns ``None`` when manual mode has no date or the group is unknown.
    """
    if anchor_mode == "manual":
        return manual_date
    if anchor_mode == "group":
        return GROUP_REFERENCE_DATES.get(group or "")
    return None


def require_anchor(anchor: date | None) -> date:
    """Fail with a user-facing message when no anchor is configured."""
    if anchor is None:
        raise ConfigurationError(
            "No valid cycle start date: choose a group or enter a start date"
        )
    return anchor


def to_date_key(day: date) -> str:
    """Format a civil date as its ``YYYY-MM-DD`` date-key."""
    day = _civil(day)
    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"


def parse_date_key(date_key: str) -> date:
    """Parse a ``YYYY-MM-DD`` date-key, rejecting any other shape."""
    if len(date_key) != 10 or date_key[4] != "-" or date_key[7] != "-":
        raise InvalidDateKeyError(f"Invalid date key {date_key!r}, expected YYYY-MM-DD")
    try:
        return date.fromisoformat(date_key)
    except ValueError:
        raise InvalidDateKeyError(f"Invalid date key {date_key!r}, expected YYYY-MM-DD")
