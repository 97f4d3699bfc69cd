from datetime import datetime, date
from sqlalchemy import Integer, DateTime, Date, ForeignKey, func
from sqlalchemy.orm import Mapped, mapped_column


class HabitEntryMixin:
    """
    Columns shared by every dated habit row.

    `day` is a plain calendar date (no time-of-day, no timezone).
    `profile_id` is set once on insert and never reassigned.
    """

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    day: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    profile_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("profiles.id"), nullable=False, index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
