"""CRM service — contact listing and ZIP/city updates against the remote CRM."""

import logging
import threading

from contact_manager.services.crm.exceptions import (
    ContactServiceError,
    CrmDomainError,
    CrmHTTPStatusError,
    CrmTransportError,
    ErrorKind,
    ZipValidationError,
)
from contact_manager.services.crm.gateway import CrmEndpoints, RequestGateway, handle_response
from contact_manager.services.crm.models import (
    Contact,
    ContactInfoResponse,
    ContactProperties,
    ListContactsResponse,
    LocationUpdateOutcome,
    LocationUpdateResult,
    UpdateCityResponse,
    UpdateZipRequest,
    UpdateZipResponse,
)
from contact_manager.services.crm.service import ContactService

logger = logging.getLogger(__name__)

__all__ = [
    "Contact",
    "ContactInfoResponse",
    "ContactProperties",
    "ContactService",
    "ContactServiceError",
    "CrmDomainError",
    "CrmEndpoints",
    "CrmHTTPStatusError",
    "CrmTransportError",
    "ErrorKind",
    "ListContactsResponse",
    "LocationUpdateOutcome",
    "LocationUpdateResult",
    "RequestGateway",
    "UpdateCityResponse",
    "UpdateZipRequest",
    "UpdateZipResponse",
    "ZipValidationError",
    "get_contact_service",
    "handle_response",
]

# Lazy-initialized so settings overrides made before first use take effect
_contact_service: ContactService | None = None
_contact_service_lock = threading.Lock()


def get_contact_service() -> ContactService:
    """Get or create the contact service singleton."""
    global _contact_service  # noqa: PLW0603
    if _contact_service is not None:
        return _contact_service

    with _contact_service_lock:
        # Double-check after acquiring lock
        if _contact_service is not None:
            return _contact_service

        from contact_manager.core.config import settings

        _contact_service = ContactService(RequestGateway(settings.CRM_API_BASE_URL))
        logger.info("Contact service initialized (base_url=%s)", settings.CRM_API_BASE_URL)
        return _contact_service
