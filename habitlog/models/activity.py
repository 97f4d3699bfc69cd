from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from habitlog.db.base import Base
from habitlog.models.entry import HabitEntryMixin


class PhysicalActivity(HabitEntryMixin, Base):
    __tablename__ = "physical_activities"

    # Free text: "running", "yoga", "weights" ...
    modality: Mapped[str] = mapped_column(String(128), nullable=False)
    duration_minutes: Mapped[int] = mapped_column(Integer, nullable=False)
