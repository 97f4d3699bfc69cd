"""
Shared schema primitives used across the API.

Bodies travel in camelCase (`amountMl`, `isComplete`); requests may also use
the snake_case field names.
"""
from typing import Annotated, Any, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Integer columns are 32-bit on PostgreSQL.
MAX_INT32 = 2_147_483_647

PositiveInt32 = Annotated[int, Field(ge=1, le=MAX_INT32)]


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ErrorResponse(BaseModel):
    """Standard error envelope returned for all 4xx/5xx responses."""
    model_config = ConfigDict(from_attributes=True)

    code: str
    message: str
    details: Optional[dict[str, Any]] = None
