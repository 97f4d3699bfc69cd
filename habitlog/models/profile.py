from datetime import datetime
from decimal import Decimal
from sqlalchemy import Integer, Numeric, DateTime, func
from sqlalchemy.orm import Mapped, mapped_column

from habitlog.db.base import Base


class Profile(Base):
    """
    The user whose habits are tracked. The app runs with a single profile;
    the schema does not prevent more.

    sleep_quality / sleep_hours hold the current day's values and are
    overwritten on every profile update, not tracked historically.
    """

    __tablename__ = "profiles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    weight: Mapped[Decimal] = mapped_column(Numeric(6, 2), nullable=False, default=0)
    height: Mapped[Decimal] = mapped_column(Numeric(6, 2), nullable=False, default=0)
    age: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    sleep_quality: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    sleep_hours: Mapped[Decimal] = mapped_column(Numeric(4, 2), nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
