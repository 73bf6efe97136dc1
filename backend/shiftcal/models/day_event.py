from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from shiftcal.database import Base
from shiftcal.types import TextArray


class DayEvent(Base):
    __tablename__ = "day_events"

    date_key: Mapped[str] = mapped_column(String(10), primary_key=True)  # YYYY-MM-DD
    note: Mapped[str] = mapped_column(Text, nullable=False, default="")
    has_vacation: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    colleagues: Mapped[list[str]] = mapped_column(TextArray, nullable=False, default=list)
    is_afz: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_personal_vacation: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    def __repr__(self) -> str:
        return f"<DayEvent(date_key={self.date_key!r}, note={self.note!r})>"
