"""OTA integration schemas."""

from typing import Any, Optional

from pydantic import Field, ValidationInfo, field_validator

from staydesk.schemas.base import BaseSchema, IDMixin, TimestampMixin, UtcDateTime, reject_null
from staydesk.models.enums import OtaPlatform


class OtaIntegrationCreate(BaseSchema):
    """Link a property to its listing on an OTA platform."""

    platform: OtaPlatform
    property_id: int
    external_property_id: str = Field(..., min_length=1, max_length=255)
    is_active: bool = True
    sync_settings: Optional[dict[str, Any]] = None
    credentials: Optional[dict[str, Any]] = None


class OtaIntegrationUpdate(BaseSchema):
    external_property_id: Optional[str] = Field(None, min_length=1, max_length=255)
    is_active: Optional[bool] = None
    sync_settings: Optional[dict[str, Any]] = None
    credentials: Optional[dict[str, Any]] = None

    @field_validator("external_property_id", "is_active", mode="after")
    @classmethod
    def not_null(cls, value, info: ValidationInfo):
        return reject_null(value, info)


class OtaIntegrationResponse(BaseSchema, IDMixin, TimestampMixin):
    """Integration response. Credentials are write-only."""

    platform: OtaPlatform
    property_id: Optional[int] = None
    external_property_id: str
    is_active: bool
    last_sync_at: Optional[UtcDateTime] = None
    sync_settings: Optional[dict[str, Any]] = None
