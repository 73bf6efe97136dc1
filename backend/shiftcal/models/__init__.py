"""SQLAlchemy ORM models.

All models are imported here so that Alembic can discover them
via ``Base.metadata`` when generating migrations.
"""

from shiftcal.models.birthday import BirthdayEntry  # noqa: F401
from shiftcal.models.calendar_settings import CalendarSettings  # noqa: F401
from shiftcal.models.day_event import DayEvent  # noqa: F401
from shiftcal.models.holiday import Holiday  # noqa: F401

__all__ = [
    "BirthdayEntry",
    "CalendarSettings",
    "DayEvent",
    "Holiday",
]
