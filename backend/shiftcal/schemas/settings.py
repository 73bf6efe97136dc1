from datetime import date
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from shiftcal.services.shift_cycle import GROUP_REFERENCE_DATES, Shift

HEX_COLOR_PATTERN = r"^#[0-9a-fA-F]{6}$"


class ShiftColor(BaseModel):
    light: str = Field(pattern=HEX_COLOR_PATTERN)
    dark: str = Field(pattern=HEX_COLOR_PATTERN)


class ShiftColorResponse(ShiftColor):
    light_text: str  # black | white
    dark_text: str


class CalendarSettingsUpdate(BaseModel):
    year: int | None = Field(None, ge=1900, le=2200)
    anchor_mode: Literal["group", "manual"] | None = None
    group: str | None = None
    manual_date: date | None = None
    show_holidays: bool | None = None
    week_starts_on_monday: bool | None = None
    shift_colors: dict[Shift, ShiftColor] | None = None

    @field_validator("group")
    @classmethod
    def group_must_exist(cls, value: str | None) -> str | None:
        if value is not None and value not in GROUP_REFERENCE_DATES:
            raise ValueError(f"Unknown group {value!r}, expected one of 1-5")
        return value

    @model_validator(mode="after")
    def manual_mode_needs_date(self):
        if self.anchor_mode == "manual" and "manual_date" in self.model_fields_set and self.manual_date is None:
            raise ValueError("Manual mode requires a start date")
        return self


class CalendarSettingsResponse(BaseModel):
    year: int
    anchor_mode: str
    group: str
    manual_date: date | None = None
    anchor: date | None = None
    show_holidays: bool
    week_starts_on_monday: bool
    shift_colors: dict[str, ShiftColorResponse]
    model_config = ConfigDict(from_attributes=True)
