from datetime import date

from pydantic import BaseModel, ConfigDict


class VacationRange(BaseModel):
    start: date
    end: date


class VacationBlockResponse(BaseModel):
    start: date
    end: date
    days: int
    model_config = ConfigDict(from_attributes=True)
