"""Analytics rollup schemas."""

from typing import Optional

from pydantic import Field

from staydesk.schemas.base import BaseSchema, IDMixin, Money, UtcDateTime
from staydesk.models.enums import AnalyticsPeriod


class AnalyticsCreate(BaseSchema):
    property_id: int
    date: UtcDateTime
    occupancy_rate: Optional[Money] = Field(None, ge=0, le=100, max_digits=5, decimal_places=2)
    revenue: Optional[Money] = Field(None, max_digits=10, decimal_places=2)
    bookings_count: int = Field(default=0, ge=0)
    average_stay: Optional[Money] = Field(None, ge=0, max_digits=5, decimal_places=2)
    source: Optional[AnalyticsPeriod] = None


class AnalyticsResponse(BaseSchema, IDMixin):
    property_id: Optional[int] = None
    date: UtcDateTime
    occupancy_rate: Optional[Money] = None
    revenue: Optional[Money] = None
    bookings_count: int
    average_stay: Optional[Money] = None
    source: Optional[AnalyticsPeriod] = None
