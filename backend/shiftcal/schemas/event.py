from datetime import date

from pydantic import BaseModel, Field

from shiftcal.services.shift_cycle import Shift


class EventUpdate(BaseModel):
    note: str = ""
    has_vacation: bool = False
    colleagues: list[str] = []
    is_afz: bool = False


class EventResponse(BaseModel):
    date: date
    shift: Shift
    note: str
    has_vacation: bool
    colleagues: list[str]
    is_afz: bool
    is_personal_vacation: bool


class EventData(BaseModel):
    note: str
    has_vacation: bool
    colleagues: list[str]
    is_afz: bool
    is_personal_vacation: bool


class VacationBlockItem(BaseModel):
    type: str = "vacation"
    start: date
    end: date
    days: int


class EventItem(BaseModel):
    type: str = "event"
    date: date
    shift: Shift
    event: EventData | None = None
    birthday: str | None = None


class MonthOverview(BaseModel):
    month: int = Field(ge=1, le=12)
    items: list[VacationBlockItem | EventItem]


class EventOverviewResponse(BaseModel):
    year: int
    months: list[MonthOverview]
