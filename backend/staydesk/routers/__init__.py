"""API Routers for StayDesk."""

from staydesk.routers.auth import router as auth_router
from staydesk.routers.users import router as users_router
from staydesk.routers.users import registration_router as user_registration_router
from staydesk.routers.dashboard import router as dashboard_router
from staydesk.routers.availability import router as availability_router
from staydesk.routers.properties import router as properties_router
from staydesk.routers.bookings import router as bookings_router
from staydesk.routers.messages import router as messages_router
from staydesk.routers.housekeeping import router as housekeeping_router
from staydesk.routers.payments import router as payments_router
from staydesk.routers.payments import intent_router as payment_intent_router
from staydesk.routers.integrations import router as integrations_router
from staydesk.routers.analytics import router as analytics_router

__all__ = [
    "auth_router",
    "users_router",
    "user_registration_router",
    "user_registration_router",
    "user_registration_router",
    "dashboard_router",
    "availability_router",
    "properties_router",
    "bookings_router",
    "messages_router",
    "housekeeping_router",
    "payments_router",
    "payment_intent_router",
    "integrations_router",
    "analytics_router",
]
