from typing import Optional
from sqlalchemy import Integer, String, Text, Boolean
from sqlalchemy.orm import Mapped, mapped_column

from habitlog.db.base import Base
from habitlog.models.entry import HabitEntryMixin


# Higher is more important.
PRIORITY_MIN = 0
PRIORITY_MAX = 5


class TaskItem(HabitEntryMixin, Base):
    """A to-do for a given day. Unlike other entries, `day` may be rewritten."""

    __tablename__ = "task_items"

    title: Mapped[str] = mapped_column(String(256), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_complete: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    priority: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
