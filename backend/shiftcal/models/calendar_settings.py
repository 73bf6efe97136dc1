from datetime import date, datetime

from sqlalchemy import JSON, Boolean, Date, DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from shiftcal.database import Base

SETTINGS_ROW_ID = 1


class CalendarSettings(Base):
    """The single row of user preferences for the calendar."""

    __tablename__ = "calendar_settings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, default=SETTINGS_ROW_ID)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    anchor_mode: Mapped[str] = mapped_column(String(10), nullable=False, default="group")  # 'group' or 'manual'
    group: Mapped[str] = mapped_column(String(10), nullable=False, default="1")
    manual_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    show_holidays: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    week_starts_on_monday: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    shift_colors: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    def __repr__(self) -> str:
        return (
            f"<CalendarSettings(year={self.year}, anchor_mode={self.anchor_mode!r}, "
            f"group={self.group!r}, manual_date={self.manual_date})>"
        )
