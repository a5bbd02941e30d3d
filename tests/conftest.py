import os

# must be set before topcar is imported: config is read at import time
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["PAYMENT_DELAY_SECONDS"] = "0"
os.environ["GEOCODER_DELAY_SECONDS"] = "0"
os.environ["SEED_DEMO_DATA"] = "0"
os.environ["TZ_NAME"] = "Australia/Sydney"

import pytest
from fastapi.testclient import TestClient

from topcar.db.base import Base, SessionLocal, engine
from topcar.db.seed import seed_catalog
from topcar.main import app


@pytest.fixture(autouse=True)
def fresh_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        seed_catalog(session)
    finally:
        session.close()
    yield


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def db():
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def booking_payload():
    def make(**overrides):
        payload = {
            "customerName": "Jane Citizen",
            "customerEmail": "jane@example.com",
            "customerPhone": "0412 345 678",
            "servicePackageId": "basic-detail",
            "vehicleType": "standard",
            "appointmentDate": "2026-11-02",
            "appointmentTime": "10:00",
            "address": "1 George St, Sydney NSW 2000",
            "paymentMethod": "online",
        }
        payload.update(overrides)
        return payload
    return make


@pytest.fixture
def book(client, booking_payload):
    def create(**overrides):
        res = client.post("/appointments", json=booking_payload(**overrides))
        assert res.status_code == 201, res.json()
        return res.json()["data"]
    return create
