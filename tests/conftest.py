# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from dojo_api.core.config import Settings
from dojo_api.main import create_app

PASSWORD = "secret123"


@pytest.fixture
def settings(tmp_path):
    """Fresh SQLite file per test, schema created on startup, payments off"""
    return Settings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'dojo_test.db'}",
        secret_key="test-secret",
        create_tables=True,
        stripe_secret_key=None,
        log_level="warning",
    )


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


def register(client, username, role="student", password=PASSWORD, **extra):
    """Register and stay logged in as the new user"""
    response = client.post(
        "/api/register",
        json={"username": username, "password": password, "role": role, **extra},
    )
    assert response.status_code == 201, response.text
    return response.json()


def login(client, username, password=PASSWORD):
    response = client.post("/api/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return response.json()


def create_class(client, instructor_id, title="Fundamentals", **extra):
    body = {"title": title, "instructorId": instructor_id, "level": "beginner", "type": "gi", **extra}
    response = client.post("/api/classes", json=body)
    assert response.status_code == 201, response.text
    return response.json()


def create_session(client, class_id, date="2026-01-05", start="18:00", end="19:00"):
    body = {"classId": class_id, "date": date, "startTime": start, "endTime": end}
    response = client.post("/api/sessions", json=body)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def instructor(client):
    """Logged-in instructor"""
    return register(client, "sensei", role="instructor", displayName="Sensei Kim")
