import pytest
from fastapi.testclient import TestClient

from contact_manager.main import app as fastapi_app
from contact_manager.services.crm import Contact, get_contact_service

# ---------------------------------------------------------------------------
# CRM payload builders
# ---------------------------------------------------------------------------


@pytest.fixture
def make_contact_payload():
    """Factory for contacts as the CRM sends them (camelCase, nested properties)."""

    def _make(contact_id: str = "101", **properties) -> dict:
        props = {
            "createdate": "2024-01-05T10:00:00.000Z",
            "lastmodifieddate": "2024-03-09T15:30:00.000Z",
            "hs_object_id": contact_id,
        }
        props.update(properties)
        return {
            "id": contact_id,
            "properties": props,
            "createdAt": "2024-01-05T10:00:00.000Z",
            "updatedAt": "2024-03-09T15:30:00.000Z",
            "archived": False,
        }

    return _make


@pytest.fixture
def make_contact(make_contact_payload):
    """Factory for validated Contact models."""

    def _make(contact_id: str = "101", **properties) -> Contact:
        return Contact.model_validate(make_contact_payload(contact_id, **properties))

    return _make


# ---------------------------------------------------------------------------
# API client
# ---------------------------------------------------------------------------


@pytest.fixture
def service_override():
    """Holder for the ContactService the API should use during a test."""
    holder: dict = {}
    fastapi_app.dependency_overrides[get_contact_service] = lambda: holder["service"]
    yield holder
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client():
    return TestClient(fastapi_app)
