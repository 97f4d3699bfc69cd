from decimal import Decimal
from sqlalchemy import Integer, Numeric
from sqlalchemy.orm import Mapped, mapped_column

from habitlog.db.base import Base
from habitlog.models.entry import HabitEntryMixin


class SleepRecord(HabitEntryMixin, Base):
    """
    How the night before `day` went.

    One record per day is expected but not enforced; readers take the
    highest id when a day has several.
    """

    __tablename__ = "sleep_records"

    hours: Mapped[Decimal] = mapped_column(Numeric(4, 2), nullable=False)
    quality: Mapped[int] = mapped_column(Integer, nullable=False, comment="0-100")
