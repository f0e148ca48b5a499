"""OTA (online travel agency) sync link model."""

from datetime import datetime
from typing import TYPE_CHECKING, Any, Optional

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from staydesk.core.database import Base, utcnow
from staydesk.models.enums import OtaPlatform, db_enum

if TYPE_CHECKING:
    from staydesk.models.property import Property


class OtaIntegration(Base):
    """Link between a property and its listing on an OTA platform.

    Represents the sync configuration only; channel state is not mirrored.
    """

    __tablename__ = "ota_integrations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    platform: Mapped[OtaPlatform] = mapped_column(db_enum(OtaPlatform), nullable=False)
    property_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("properties.id"), nullable=True, index=True
    )
    external_property_id: Mapped[str] = mapped_column(String(255), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    last_sync_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)

    sync_settings: Mapped[Optional[dict[str, Any]]] = mapped_column(JSON, nullable=True)
    # Never serialised in API responses
    credentials: Mapped[Optional[dict[str, Any]]] = mapped_column(JSON, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    property: Mapped[Optional["Property"]] = relationship(
        "Property", back_populates="ota_integrations"
    )
