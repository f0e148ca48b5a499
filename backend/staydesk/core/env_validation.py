"""
Runtime Environment Validation Module

Validates the environment at application startup. If validation fails the
application refuses to start (hard fail) instead of erroring on the first
request.
"""

import sys

from pydantic import ValidationError

from staydesk.core.config import Settings, get_settings

SUPPORTED_DATABASE_SCHEMES = ("postgresql", "sqlite")


def validate_environment() -> Settings:
    """
    Validate all required environment variables at startup.

    Returns:
        Settings: Validated settings object

    Raises:
        SystemExit: If validation fails (exit code 1)
    """
    try:
        settings = get_settings()
    except ValidationError as e:
        print("❌ FATAL: Environment validation failed", file=sys.stderr)
        print("\nMissing or invalid environment variables:", file=sys.stderr)
        for error in e.errors():
            field = " -> ".join(str(loc) for loc in error["loc"])
            print(f"   • {field}: {error['msg']}", file=sys.stderr)
        print("\nPlease check your .env file or environment variables.", file=sys.stderr)
        sys.exit(1)

    # 1. CORS: wildcard only allowed in debug mode
    if not settings.debug and "*" in settings.cors_origins:
        print(
            "❌ FATAL: Wildcard CORS origin (*) detected in production mode.",
            file=sys.stderr,
        )
        print(
            "   Set ALLOWED_ORIGINS to specific domains (comma-separated).",
            file=sys.stderr,
        )
        sys.exit(1)

    # 2. Database URL: PostgreSQL (production) or SQLite (dev/test)
    if not settings.database_url.startswith(SUPPORTED_DATABASE_SCHEMES):
        print(
            "❌ FATAL: DATABASE_URL must be postgresql+asyncpg://... or sqlite+aiosqlite://...",
            file=sys.stderr,
        )
        sys.exit(1)

    # 3. Booking policy: statuses must be known booking statuses
    from staydesk.models.enums import BookingStatus

    known = {s.value for s in BookingStatus}
    unknown = [s for s in settings.active_booking_statuses if s not in known]
    if unknown:
        print(
            f"❌ FATAL: ACTIVE_BOOKING_STATUSES contains unknown statuses: {unknown}",
            file=sys.stderr,
        )
        sys.exit(1)

    if not settings.stripe_secret_key:
        print("⚠️  STRIPE_SECRET_KEY not set - payment intents disabled", file=sys.stderr)

    return settings


if __name__ == "__main__":
    validate_environment()
    print("✅ All environment variables are valid!")
