"""SQLAlchemy models for StayDesk."""

from staydesk.models.user import User, UserSession
from staydesk.models.property import Property
from staydesk.models.booking import Booking
from staydesk.models.message import Message
from staydesk.models.housekeeping import HousekeepingTask
from staydesk.models.payment import Payment
from staydesk.models.ota_integration import OtaIntegration
from staydesk.models.analytics import Analytics

__all__ = [
    "User",
    "UserSession",
    "Property",
    "Booking",
    "Message",
    "HousekeepingTask",
    "Payment",
    "OtaIntegration",
    "Analytics",
]
