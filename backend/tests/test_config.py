"""Tests for settings and the lazily created contact service."""

import pytest

import contact_manager.services.crm as crm
from contact_manager.core.config import Settings, settings


@pytest.fixture
def reset_service_singleton():
    original = crm._contact_service
    crm._contact_service = None
    yield
    crm._contact_service = original


def test_defaults():
    s = Settings()
    assert s.CRM_API_BASE_URL == "http://localhost:3000"
    assert s.CONTACT_LIST_DEFAULT_LIMIT == 50
    assert s.API_V1_PREFIX == "/api/v1"


def test_env_override(monkeypatch):
    monkeypatch.setenv("CRM_API_BASE_URL", "https://crm.example.com")
    assert Settings().CRM_API_BASE_URL == "https://crm.example.com"


def test_service_uses_configured_base_url(monkeypatch, reset_service_singleton):
    monkeypatch.setattr(settings, "CRM_API_BASE_URL", "https://crm.example.com/")

    service = crm.get_contact_service()

    assert service.gateway.build_url("/list-contacts") == "https://crm.example.com/list-contacts"
    assert crm.get_contact_service() is service
