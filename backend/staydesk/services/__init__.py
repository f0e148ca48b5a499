"""Business services for StayDesk."""

from staydesk.services.auth import AuthService
from staydesk.services.availability import AvailabilityService
from staydesk.services.bookings import BookingService
from staydesk.services.dashboard import DashboardService
from staydesk.services.integrations import OtaSyncService
from staydesk.services.payments import PaymentService, StripeGateway

__all__ = [
    "AuthService",
    "AvailabilityService",
    "BookingService",
    "DashboardService",
    "OtaSyncService",
    "PaymentService",
    "StripeGateway",
]
