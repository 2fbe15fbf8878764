"""Pytest configuration and shared fixtures.

The app is pointed at an in-memory SQLite database before it is imported.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"

import pytest
from fastapi.testclient import TestClient

from educify.core.database import Base, SessionLocal, engine
from educify.main import app


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client() -> TestClient:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def register_user(client):
    """Factory: register a user and return (user, auth headers)."""

    def _register(email="student@example.com", name="Sam Student", password="pass1234", role=None, phone=None):
        payload = {"name": name, "email": email, "password": password}
        if role:
            payload["role"] = role
        if phone:
            payload["phone"] = phone
        response = client.post("/api/auth/register", json=payload)
        assert response.status_code == 201, response.text
        body = response.json()
        return body["user"], {"Authorization": f"Bearer {body['token']}"}

    return _register


@pytest.fixture
def auth_headers(register_user) -> dict:
    _, headers = register_user()
    return headers


@pytest.fixture
def create_tutor(client, register_user):
    """Factory: register a tutor user and create a profile for them."""
    counter = {"n": 0}

    def _create(**overrides):
        counter["n"] += 1
        n = counter["n"]
        _, headers = register_user(email=f"tutor{n}@example.com", name=f"Tutor {n}", role="tutor")
        payload = {"subject": "Mathematics", "rate": 40}
        payload.update(overrides)
        response = client.post("/api/tutors", json=payload, headers=headers)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_booking(client, auth_headers):
    """Factory: book a tutor as the default student."""

    def _create(tutor_id, **overrides):
        payload = {
            "tutor_id": tutor_id,
            "subject": "Mathematics",
            "booking_date": "2026-11-02",
            "booking_time": "15:00",
            "duration": 60,
            "amount": 40,
        }
        payload.update(overrides)
        response = client.post("/api/bookings", json=payload, headers=auth_headers)
        assert response.status_code == 201, response.text
        return response.json()

    return _create
