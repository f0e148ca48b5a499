"""Dashboard response schemas."""

from datetime import date, datetime
from typing import Any, Optional

from staydesk.schemas.base import BaseSchema, Money
from staydesk.models.enums import AvailabilityStatus


class DashboardStats(BaseSchema):
    """Snapshot rendered by the stats cards."""

    total_properties: int
    active_bookings: int
    occupancy_rate: float
    monthly_revenue: Money
    unread_messages: int
    pending_tasks: int


class PropertyStatusEntry(BaseSchema):
    property_id: int
    name: str
    status: AvailabilityStatus


class AvailabilitySummary(BaseSchema):
    """Per-day availability cards (available / occupied / maintenance)."""

    date: date
    total: int
    available: int
    occupied: int
    maintenance: int
    occupancy_rate: float
    properties: list[PropertyStatusEntry]


class ActivityItem(BaseSchema):
    type: str
    action: str
    timestamp: Optional[datetime] = None
    details: dict[str, Any]


class RecentActivity(BaseSchema):
    activities: list[ActivityItem]
    total: int
