"""
Generic habit service.

Every habit domain (water, sunlight, meditation, sleep, physical activity,
tasks) is the same thing: a dated row with a small payload, owned by the
profile. `HabitService` holds the shared store operations and is configured
per domain with:

  model        SQLAlchemy model using HabitEntryMixin
  fields       payload columns accepted by add()/update()
  merge        weekly fold strategy (see services/aggregator.py)
  value_field  column fed to the fold; None feeds the whole row
  recommend    callable(db) -> daily target, or None for no target
  updatable    columns update() may touch; defaults to `fields`

Identifier-addressed mutations signal absence with None / False; turning
that into an HTTP 404 is the router's job.
"""
from __future__ import annotations

import logging
import operator
from datetime import date
from typing import Any, Callable, Generic, Optional, TypeVar

from sqlalchemy import func
from sqlalchemy.orm import Session

from habitlog.services.aggregator import Merge, SUM, aggregate_week
from habitlog.services.profile import ensure_profile
from habitlog.services.week import week_end

logger = logging.getLogger(__name__)

E = TypeVar("E")


class HabitService(Generic[E]):
    def __init__(
        self,
        name: str,
        model: type[E],
        fields: tuple[str, ...],
        merge: Optional[Merge] = None,
        value_field: Optional[str] = None,
        recommend: Optional[Callable[[Session], int]] = None,
        updatable: Optional[tuple[str, ...]] = None,
    ):
        self.name = name
        self.model = model
        self.fields = fields
        self.merge = merge
        self.value_field = value_field
        self.recommend = recommend
        self.updatable = updatable if updatable is not None else fields

    def __repr__(self) -> str:
        return f"HabitService({self.name!r}, {self.model.__name__})"

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def entries_for_day(self, db: Session, day: date) -> list[E]:
        model = self.model
        return (
            db.query(model)
            .filter(model.day == day)
            .order_by(model.id)
            .all()
        )

    def entries_between(self, db: Session, start: date, end: date) -> list[E]:
        """Rows with start <= day < end, in storage (id) order."""
        model = self.model
        return (
            db.query(model)
            .filter(model.day >= start, model.day < end)
            .order_by(model.id)
            .all()
        )

    def all_entries(self, db: Session) -> list[E]:
        model = self.model
        return db.query(model).order_by(model.day, model.id).all()

    def latest_for_day(self, db: Session, day: date) -> Optional[E]:
        """Highest-id row of the day; matches the REPLACE fold."""
        model = self.model
        return (
            db.query(model)
            .filter(model.day == day)
            .order_by(model.id.desc())
            .first()
        )

    def daily_total(self, db: Session, day: date) -> int:
        column = getattr(self.model, self._require_value_field())
        total = (
            db.query(func.sum(column))
            .filter(self.model.day == day)
            .scalar()
        )
        return int(total or 0)

    def weekly(self, db: Session, week_start: date) -> dict[date, Any]:
        """Calendar-complete {day: aggregate} for the 7 days from week_start."""
        if self.merge is None:
            raise TypeError(f"{self.name} has no weekly aggregation")
        rows = self.entries_between(db, week_start, week_end(week_start))
        if self.value_field is None:
            return aggregate_week(week_start, rows, self.merge)
        return aggregate_week(
            week_start,
            rows,
            self.merge,
            value_of=operator.attrgetter(self.value_field),
        )

    def recommended(self, db: Session) -> Optional[int]:
        if self.recommend is None:
            return None
        return self.recommend(db)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def add(self, db: Session, day: date, **fields: Any) -> E:
        """
        Two commits, in order: ensure the profile exists, then insert the
        entry. A failure between them leaves the profile without the entry.
        """
        self._check_fields(fields, self.fields)
        profile = ensure_profile(db)

        entry = self.model(day=day, profile_id=profile.id, **fields)
        db.add(entry)
        db.commit()
        db.refresh(entry)
        logger.info("Added %s entry id=%s day=%s", self.name, entry.id, day)
        return entry

    def update(self, db: Session, entry_id: int, **fields: Any) -> Optional[E]:
        self._check_fields(fields, self.updatable)
        entry = db.get(self.model, entry_id)
        if entry is None:
            logger.debug("Update of missing %s entry id=%s", self.name, entry_id)
            return None

        for key, value in fields.items():
            setattr(entry, key, value)
        db.commit()
        db.refresh(entry)
        logger.info("Updated %s entry id=%s", self.name, entry_id)
        return entry

    def delete(self, db: Session, entry_id: int) -> bool:
        entry = db.get(self.model, entry_id)
        if entry is None:
            logger.debug("Delete of missing %s entry id=%s", self.name, entry_id)
            return False

        db.delete(entry)
        db.commit()
        logger.info("Deleted %s entry id=%s", self.name, entry_id)
        return True

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _check_fields(self, fields: dict[str, Any], allowed: tuple[str, ...]) -> None:
        unknown = set(fields) - set(allowed)
        if unknown:
            raise TypeError(
                f"{self.name}: unexpected field(s) {', '.join(sorted(unknown))}"
            )

    def _require_value_field(self) -> str:
        if self.value_field is None or self.merge is not SUM:
            raise TypeError(f"{self.name} has no summable value")
        return self.value_field
