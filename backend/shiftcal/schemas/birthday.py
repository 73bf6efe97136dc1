from pydantic import BaseModel, ConfigDict, Field, field_validator


class BirthdayCreate(BaseModel):
    month: int = Field(ge=0, le=11)  # 0 = January
    day: int = Field(ge=1, le=31)
    name: str

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Name must not be empty")
        return value


class BirthdayResponse(BaseModel):
    month: int
    day: int
    name: str
    model_config = ConfigDict(from_attributes=True)
