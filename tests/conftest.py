"""Pytest configuration and shared fixtures."""

from typing import Callable, Dict, List, Tuple

import pytest
from fastapi.testclient import TestClient

from ticketing_api.app.core.config import settings
from ticketing_api.app.core.db import init_db
from ticketing_api.app.core.security import create_access_token
from ticketing_api.app.main import app
from ticketing_api.app.schemas.user import User, UserCreate
from ticketing_api.app.services.audit_relay import AuditRelay
from ticketing_api.app.services.notification_service import NotificationService
from ticketing_api.app.services.user_service import UserService


@pytest.fixture(autouse=True)
def database(tmp_path, monkeypatch):
    """Point the app at a fresh SQLite file for every test."""
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "test.db"))
    init_db()


@pytest.fixture
def outbox(monkeypatch) -> List[Dict[str, str]]:
    """Capture notification emails instead of sending them."""
    sent: List[Dict[str, str]] = []

    async def fake_send(to, subject, html_body):
        sent.append({"to": to, "subject": subject, "html": html_body})

    monkeypatch.setattr(NotificationService, "send", fake_send)
    return sent


@pytest.fixture
def relayed(monkeypatch) -> List[Tuple[dict, str]]:
    """Capture audit relay calls as ``(record, auth_token)`` pairs."""
    calls: List[Tuple[dict, str]] = []

    async def fake_relay(record, auth_token):
        calls.append((record, auth_token))

    monkeypatch.setattr(AuditRelay, "relay", fake_relay)
    return calls


@pytest.fixture
def client(outbox, relayed) -> TestClient:
    return TestClient(app)


@pytest.fixture
def make_user() -> Callable[..., Tuple[User, Dict[str, str]]]:
    """Create a user and return it with ready-to-use auth headers."""
    counter = {"n": 0}

    def _make(role: str = "user", name: str = None) -> Tuple[User, Dict[str, str]]:
        counter["n"] += 1
        name = name or f"{role.title()} {counter['n']}"
        user = UserService.create_user(
            UserCreate(name=name, email=f"{role}{counter['n']}@example.com", role=role)
        )
        token = create_access_token({"sub": str(user.id)})
        return user, {"Authorization": f"Bearer {token}"}

    return _make


EXPO = {
    "name": "Expo",
    "description": "Annual trade expo",
    "date": "2025-01-01",
    "location": "Lagos",
    "ticketPrice": 50,
    "maxTickets": 100,
}


@pytest.fixture
def expo() -> dict:
    return dict(EXPO)
