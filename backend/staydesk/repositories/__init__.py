"""Entity repositories for StayDesk."""

from staydesk.repositories.base import Repository, SqlRepository
from staydesk.repositories.users import UserRepository, SessionRepository
from staydesk.repositories.properties import PropertyRepository
from staydesk.repositories.bookings import BookingRepository
from staydesk.repositories.messages import MessageRepository
from staydesk.repositories.housekeeping import HousekeepingRepository
from staydesk.repositories.payments import PaymentRepository
from staydesk.repositories.integrations import OtaIntegrationRepository
from staydesk.repositories.analytics import AnalyticsRepository
from staydesk.repositories.references import ensure_references

__all__ = [
    "Repository",
    "SqlRepository",
    "UserRepository",
    "SessionRepository",
    "PropertyRepository",
    "BookingRepository",
    "MessageRepository",
    "HousekeepingRepository",
    "PaymentRepository",
    "OtaIntegrationRepository",
    "AnalyticsRepository",
    "ensure_references",
]
