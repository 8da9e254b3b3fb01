from fastapi import FastAPI
from fastapi.testclient import TestClient

from app import dependencies as deps
from app.routers import contact
from app.services.contact_service import ContactDeliveryError, ContactService
from tests.conftest import FakeNotifier


def build_client(notifier):
    app = FastAPI()
    app.dependency_overrides[deps.get_contact_service] = lambda: ContactService(notifier)
    app.include_router(contact.router)
    return TestClient(app)


def test_contact_success():
    notifier = FakeNotifier()
    client = build_client(notifier)

    res = client.post("/api/contact", json={"email": "me@example.com", "message": "Hello"})

    assert res.status_code == 200
    assert res.json() == {"success": True, "message": "Message sent successfully"}
    assert notifier.sent[0].message == "Hello"


def test_contact_missing_fields_returns_400():
    client = build_client(FakeNotifier())

    res = client.post("/api/contact", json={"email": "me@example.com"})

    assert res.status_code == 400
    assert res.json() == {"success": False, "error": "Email and message are required"}


def test_contact_invalid_email_returns_400():
    client = build_client(FakeNotifier())

    res = client.post("/api/contact", json={"email": "not-an-email", "message": "Hi"})

    assert res.status_code == 400
    assert res.json()["error"] == "Please enter a valid email address"


def test_contact_delivery_failure_returns_502():
    client = build_client(FakeNotifier(error=ContactDeliveryError("smtp down")))

    res = client.post("/api/contact", json={"email": "me@example.com", "message": "Hi"})

    assert res.status_code == 502
    assert res.json() == {"success": False, "error": "Failed to deliver message"}


def test_contact_unexpected_error_returns_500():
    client = build_client(FakeNotifier(error=RuntimeError("boom")))

    res = client.post("/api/contact", json={"email": "me@example.com", "message": "Hi"})

    assert res.status_code == 500
    assert res.json()["error"] == "Internal server error"


def test_contact_malformed_json_returns_500():
    notifier = FakeNotifier()
    client = build_client(notifier)

    res = client.post("/api/contact", content="{not json", headers={"Content-Type": "application/json"})

    assert res.status_code == 500
    assert res.json() == {"success": False, "error": "Internal server error"}
    assert notifier.sent == []


def test_contact_non_string_email_returns_400():
    client = build_client(FakeNotifier())

    res = client.post("/api/contact", json={"email": 5, "message": "hi"})

    assert res.status_code == 400
    assert res.json() == {"success": False, "error": "Please enter a valid email address"}


def test_contact_non_object_body_returns_400():
    client = build_client(FakeNotifier())

    res = client.post("/api/contact", json=["me@example.com", "hi"])

    assert res.status_code == 400
    assert res.json() == {"success": False, "error": "Email and message are required"}
