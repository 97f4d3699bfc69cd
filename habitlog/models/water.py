from sqlalchemy import Integer
from sqlalchemy.orm import Mapped, mapped_column

from habitlog.db.base import Base
from habitlog.models.entry import HabitEntryMixin


class WaterIntake(HabitEntryMixin, Base):
    """One glass/bottle of water, in millilitres."""

    __tablename__ = "water_intakes"

    amount_ml: Mapped[int] = mapped_column(Integer, nullable=False)
