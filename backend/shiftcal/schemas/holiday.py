from pydantic import BaseModel, Field


class HolidaySyncRequest(BaseModel):
    year: int = Field(ge=1900, le=2200)
    subdivision: str | None = None


class HolidaysResponse(BaseModel):
    year: int
    subdivision: str
    holidays: dict[str, str]
