"""Daily targets per habit domain."""
from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from habitlog.core.config import settings
from habitlog.models.profile import Profile


def water_ml(profile: Optional[Profile], ml_per_kg: Optional[int] = None) -> int:
    """
    Body weight × 35 mL, rounded half away from zero.
    0 when there is no profile yet or its weight has not been set.
    """
    if profile is None or profile.weight is None:
        return 0
    weight = Decimal(str(profile.weight))
    if weight <= 0:
        return 0
    factor = settings.WATER_ML_PER_KG if ml_per_kg is None else ml_per_kg
    return int((weight * factor).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def sunlight_minutes() -> int:
    return settings.SUNLIGHT_MINUTES


def meditation_minutes() -> int:
    return settings.MEDITATION_MINUTES
