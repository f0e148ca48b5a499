"""StayDesk - FastAPI Application Entry Point."""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from staydesk.core.config import get_settings
from staydesk.core.database import create_all, engine
from staydesk.core.env_validation import validate_environment
from staydesk.core.errors import register_error_handlers
from staydesk.core.security import get_current_user
from staydesk.routers import (
    auth_router,
    user_registration_router,
    users_router,
    dashboard_router,
    availability_router,
    properties_router,
    bookings_router,
    messages_router,
    housekeeping_router,
    payments_router,
    payment_intent_router,
    integrations_router,
    analytics_router,
)

# Hard-fails (exit 1) when required configuration is missing
validate_environment()

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def include_routers(app: FastAPI, api_prefix: str, require_auth: bool) -> None:
    """Mount every API router. Registration and login stay open; the rest is
    gated behind a bearer session when ``require_auth`` is set."""
    protected = [Depends(get_current_user)] if require_auth else []

    app.include_router(auth_router, prefix=api_prefix)
    app.include_router(user_registration_router, prefix=api_prefix)
    for router in (
        users_router,
        dashboard_router,
        availability_router,
        properties_router,
        bookings_router,
        messages_router,
        housekeeping_router,
        payments_router,
        payment_intent_router,
        integrations_router,
        analytics_router,
    ):
        app.include_router(router, prefix=api_prefix, dependencies=protected)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    if settings.auto_create_tables:
        logger.info("Creating database tables")
        await create_all()
    yield
    await engine.dispose()


app = FastAPI(
    title=settings.app_name,
    description="Short-term rental management: properties, bookings, guest messages, housekeeping, payments and OTA channels.",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

register_error_handlers(app)

# Wildcard (*) is blocked outside debug by env_validation.py
logger.info(f"CORS configured with origins: {settings.cors_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

include_routers(app, settings.api_prefix, settings.require_auth)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": settings.app_name}


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": settings.app_name,
        "version": "1.0.0",
        "docs": "/docs" if settings.debug else "Disabled in production",
    }
