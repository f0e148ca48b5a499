import os
import tempfile
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine

_DB_DIR = tempfile.mkdtemp(prefix="staydesk-tests-")
_DB_PATH = Path(_DB_DIR) / "staydesk.db"

os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_PATH}"
os.environ["ALLOWED_ORIGINS"] = "http://localhost:5173"
os.environ["DEBUG"] = "true"
os.environ["PASSWORD_BCRYPT_ROUNDS"] = "4"
os.environ.pop("STRIPE_SECRET_KEY", None)
os.environ.pop("REQUIRE_AUTH", None)


@pytest.fixture(scope="session")
def app():
    """Import the FastAPI app once per test session, after the env is set."""
    from staydesk.main import app as staydesk_app

    return staydesk_app


@pytest.fixture(scope="session")
def sync_engine():
    engine = create_engine(f"sqlite:///{_DB_PATH}")
    yield engine
    engine.dispose()


@pytest.fixture(autouse=True)
def fresh_schema(sync_engine):
    """Every test starts from empty tables."""
    from staydesk.core.database import Base
    import staydesk.models  # noqa: F401

    Base.metadata.drop_all(sync_engine)
    Base.metadata.create_all(sync_engine)
    yield


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def settings():
    from staydesk.core.config import get_settings

    return get_settings()


def property_payload(**overrides):
    payload = {
        "name": "Harbor Loft",
        "address": "12 Quay Street, Lisbon",
        "type": "apartment",
        "bedrooms": 2,
        "bathrooms": 1,
        "maxGuests": 4,
        "basePrice": 150,
    }
    payload.update(overrides)
    return payload


def booking_payload(property_id, **overrides):
    payload = {
        "propertyId": property_id,
        "guestName": "Ana Costa",
        "guestEmail": "ana@staydesk.io",
        "checkInDate": "2030-03-10T15:00:00",
        "checkOutDate": "2030-03-13T11:00:00",
        "guests": 2,
        "totalAmount": 450,
        "status": "confirmed",
    }
    payload.update(overrides)
    return payload


@pytest.fixture()
def make_property(client):
    def _make(**overrides):
        resp = client.post("/api/properties", json=property_payload(**overrides))
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _make


@pytest.fixture()
def make_booking(client):
    def _make(property_id, **overrides):
        resp = client.post("/api/bookings", json=booking_payload(property_id, **overrides))
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _make
