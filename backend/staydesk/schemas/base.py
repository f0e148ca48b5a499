"""Base schema utilities."""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, PlainSerializer, ValidationInfo
from pydantic.alias_generators import to_camel

# Decimal internally, JSON number on the wire
Money = Annotated[
    Decimal,
    PlainSerializer(lambda v: float(v), return_type=float, when_used="json"),
]


def _to_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


# Columns hold naive UTC; offsets on input are normalised
UtcDateTime = Annotated[datetime, AfterValidator(_to_naive_utc)]


def reject_null(value, info: ValidationInfo):
    """Patch validator for columns that cannot be cleared."""
    if value is None:
        raise ValueError(f"{info.field_name} cannot be null")
    return value


class BaseSchema(BaseModel):
    """Base schema with common configuration.

    Public field names are camelCase; snake_case is accepted on input too.
    """

    model_config = ConfigDict(
        from_attributes=True,
        str_strip_whitespace=True,
        validate_assignment=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class TimestampMixin(BaseModel):
    """Mixin for the created_at timestamp."""

    created_at: Optional[datetime] = None


class IDMixin(BaseModel):
    """Mixin for integer id field."""

    id: int
