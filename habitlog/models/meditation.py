from sqlalchemy import Integer
from sqlalchemy.orm import Mapped, mapped_column

from habitlog.db.base import Base
from habitlog.models.entry import HabitEntryMixin


class MeditationSession(HabitEntryMixin, Base):
    __tablename__ = "meditation_sessions"

    minutes: Mapped[int] = mapped_column(Integer, nullable=False)
