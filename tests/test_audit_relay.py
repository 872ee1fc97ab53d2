"""Tests for AuditRelay and the admin-action endpoints it targets."""

import asyncio
import json

import httpx
import pytest

from ticketing_api.app.core.config import settings
from ticketing_api.app.core.errors import RelayError
from ticketing_api.app.main import app
from ticketing_api.app.services.audit_relay import AuditRelay


RECORD = {
    "action": "Deleted Event",
    "targetId": 3,
    "targetType": "event",
    "description": 'Event "Expo" was deleted by admin.',
}


@pytest.fixture
def audit_url(monkeypatch):
    url = "http://audit.test/api/v1/admin/action"
    monkeypatch.setattr(settings, "audit_service_url", url)
    return url


def use_transport(monkeypatch, handler):
    monkeypatch.setattr(AuditRelay, "transport", httpx.MockTransport(handler))


def test_relay_posts_record_with_forwarded_token(monkeypatch, audit_url):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(201, json={"message": "Admin action logged"})

    use_transport(monkeypatch, handler)

    asyncio.run(AuditRelay.relay(RECORD, "caller-token"))

    (request,) = seen
    assert request.method == "POST"
    assert str(request.url) == audit_url
    assert request.headers["Authorization"] == "Bearer caller-token"
    assert json.loads(request.content) == RECORD


def test_error_status_raises_relay_error(monkeypatch, audit_url):
    use_transport(monkeypatch, lambda request: httpx.Response(503))

    with pytest.raises(RelayError, match="503"):
        asyncio.run(AuditRelay.relay(RECORD, "caller-token"))


def test_unreachable_service_raises_relay_error(monkeypatch, audit_url):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    use_transport(monkeypatch, handler)

    with pytest.raises(RelayError, match="unreachable"):
        asyncio.run(AuditRelay.relay(RECORD, "caller-token"))


class TestAdminActionEndpoints:
    def test_admin_can_log_and_list_actions(self, client, make_user):
        admin, headers = make_user("admin")

        first = client.post("/api/v1/admin/action", json=RECORD, headers=headers)
        client.post(
            "/api/v1/admin/action",
            json={**RECORD, "targetId": 4, "description": "second"},
            headers=headers,
        )

        assert first.status_code == 201
        logged = first.json()["adminAction"]
        assert logged["action"] == "Deleted Event"
        assert str(logged["targetId"]) == "3"
        assert logged["targetType"] == "event"
        assert logged["performedBy"] == admin.id

        listed = client.get("/api/v1/admin/actions", headers=headers)
        assert listed.status_code == 200
        assert [a["description"] for a in listed.json()["actions"]] == [
            "second",
            RECORD["description"],
        ]

    def test_regular_user_cannot_log(self, client, make_user):
        _, headers = make_user()

        response = client.post("/api/v1/admin/action", json=RECORD, headers=headers)

        assert response.status_code == 403

    def test_empty_log_is_an_empty_list(self, client, make_user):
        _, headers = make_user("superadmin")

        response = client.get("/api/v1/admin/actions", headers=headers)

        assert response.json() == {"actions": []}


def test_delete_relays_into_admin_action_log(monkeypatch, make_user, outbox, expo):
    """End to end: the relay hits this app's own /admin/action route."""
    from fastapi.testclient import TestClient

    monkeypatch.setattr(settings, "audit_service_url", "http://testserver/api/v1/admin/action")
    monkeypatch.setattr(AuditRelay, "transport", httpx.ASGITransport(app=app))
    client = TestClient(app)
    _, owner = make_user()
    admin, admin_headers = make_user("admin")
    event = client.post("/api/v1/create-event", json=expo, headers=owner).json()["event"]

    response = client.delete(f"/api/v1/event/{event['id']}", headers=admin_headers)

    assert response.status_code == 200
    (action,) = client.get("/api/v1/admin/actions", headers=admin_headers).json()["actions"]
    assert str(action["targetId"]) == str(event["id"])
    assert action["performedBy"] == admin.id
