from decimal import Decimal
from pydantic import Field

from habitlog.schemas.common import CamelModel


class ProfileOut(CamelModel):
    # Numeric columns go out as floats so clients get JSON numbers, not strings.
    id: int
    weight: float = Field(description="Body weight in kg.")
    height: float = Field(description="Height in cm.")
    age: int
    sleep_quality: int = Field(description="Today's sleep quality score, 0–100.")
    sleep_hours: float = Field(description="Today's hours of sleep.")


class ProfileUpdate(CamelModel):
    """Full replacement: every field is required."""

    weight: Decimal = Field(ge=1, le=1000, examples=[72.5])
    height: Decimal = Field(ge=1, le=300, examples=[178])
    age: int = Field(ge=1, le=120, examples=[34])
    sleep_quality: int = Field(ge=0, le=100, examples=[80])
    sleep_hours: Decimal = Field(ge=0, le=24, examples=[7.5])
