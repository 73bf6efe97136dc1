import uuid
from datetime import datetime

from sqlalchemy import DateTime, Integer, String, UniqueConstraint, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from shiftcal.database import Base


class BirthdayEntry(Base):
    __tablename__ = "birthdays"
    __table_args__ = (
        UniqueConstraint("month", "day", name="uq_birthdays_month_day"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    month: Mapped[int] = mapped_column(Integer, nullable=False)  # 0-11
    day: Mapped[int] = mapped_column(Integer, nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    def __repr__(self) -> str:
        return f"<BirthdayEntry(month={self.month}, day={self.day}, name={self.name!r})>"
