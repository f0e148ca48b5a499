"""Enumeration types for the StayDesk domain model."""

from enum import Enum

from sqlalchemy import Enum as SQLEnum


class UserRole(str, Enum):
    """Role of a dashboard user."""
    ADMIN = "admin"
    OWNER = "owner"
    STAFF = "staff"


class BookingStatus(str, Enum):
    """Lifecycle status of a reservation."""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CHECKED_IN = "checked_in"
    CHECKED_OUT = "checked_out"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class BookingSource(str, Enum):
    """Channel a booking came in through."""
    DIRECT = "direct"
    AIRBNB = "airbnb"
    BOOKING_COM = "booking_com"
    VRBO = "vrbo"


class BookingPaymentStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    REFUNDED = "refunded"


class MessageSender(str, Enum):
    GUEST = "guest"
    HOST = "host"
    SYSTEM = "system"
    AI = "ai"


class MessageSource(str, Enum):
    DIRECT = "direct"
    AIRBNB = "airbnb"
    BOOKING_COM = "booking_com"
    VRBO = "vrbo"
    WHATSAPP = "whatsapp"


class TaskType(str, Enum):
    """Kind of housekeeping work item."""
    CLEANING = "cleaning"
    MAINTENANCE = "maintenance"
    INSPECTION = "inspection"


class TaskStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    REFUNDED = "refunded"


class PaymentMethod(str, Enum):
    STRIPE = "stripe"
    CASH = "cash"
    BANK_TRANSFER = "bank_transfer"


class OtaPlatform(str, Enum):
    """Online travel agency a property can be linked to."""
    AIRBNB = "airbnb"
    BOOKING_COM = "booking_com"
    VRBO = "vrbo"
    EXPEDIA = "expedia"


class AnalyticsPeriod(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class AvailabilityStatus(str, Enum):
    """Derived status of a property on a given day."""
    OCCUPIED = "occupied"
    MAINTENANCE = "maintenance"
    AVAILABLE = "available"


def db_enum(enum_cls: type[Enum]):
    """Column type storing the enum's *values* as plain strings."""
    return SQLEnum(
        enum_cls,
        values_callable=lambda members: [m.value for m in members],
        native_enum=False,
        length=32,
    )
