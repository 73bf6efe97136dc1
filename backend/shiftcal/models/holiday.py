import uuid
from datetime import date, datetime

from sqlalchemy import Date, DateTime, String, UniqueConstraint, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from shiftcal.database import Base


class Holiday(Base):
    """Cached public holiday for one state, as delivered by the holiday API."""

    __tablename__ = "holidays"
    __table_args__ = (
        UniqueConstraint("day", "subdivision", name="uq_holidays_day_subdivision"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    day: Mapped[date] = mapped_column(Date, nullable=False)
    subdivision: Mapped[str] = mapped_column(String(10), nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    fetched_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    def __repr__(self) -> str:
        return f"<Holiday(day={self.day}, subdivision={self.subdivision!r}, name={self.name!r})>"
