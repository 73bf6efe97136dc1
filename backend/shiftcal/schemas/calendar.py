from datetime import date

from pydantic import BaseModel

from shiftcal.schemas.event import EventData
from shiftcal.services.shift_cycle import Shift


class DayRecordResponse(BaseModel):
    date: date
    shift: Shift
    event: EventData | None = None
    holiday: str | None = None
    birthday: str | None = None


class CalendarResponse(BaseModel):
    year: int
    anchor: date
    days: list[DayRecordResponse]


class ShiftResponse(BaseModel):
    date: date
    shift: Shift
    anchor: date | None = None
