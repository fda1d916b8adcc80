"""Contact service: domain operations over the CRM request gateway."""

import logging
import re
from datetime import datetime
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from contact_manager.services.crm.exceptions import CrmDomainError, ZipValidationError
from contact_manager.services.crm.gateway import CrmEndpoints, RequestGateway
from contact_manager.services.crm.models import (
    Contact,
    ContactInfoResponse,
    ListContactsResponse,
    LocationUpdateOutcome,
    LocationUpdateResult,
    UpdateCityResponse,
    UpdateZipRequest,
    UpdateZipResponse,
)

logger = logging.getLogger(__name__)

_ZIP_PATTERN = re.compile(r"^[0-9]{5}(-[0-9]{4})?$")

UNNAMED_CONTACT = "Unnamed Contact"
UNKNOWN_INITIAL = "U"
INVALID_DATE = "Invalid Date"

# en-US short month names, independent of the process locale
_MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

ZIP_REQUIRED_MESSAGE = "ZIP code is required"
ZIP_INVALID_MESSAGE = "Please enter a valid ZIP code (e.g., 12345 or 12345-6789)"

_ModelT = TypeVar("_ModelT", bound=BaseModel)


def _parse(model: type[_ModelT], data: object) -> _ModelT:
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise CrmDomainError("Malformed response payload") from exc


class ContactService:
    """Contact operations backed by a ``RequestGateway``.

    Stateless apart from the gateway it wraps. Errors from the gateway
    propagate unchanged; the only non-throwing failure is the partial
    outcome of ``update_zip_and_city``.
    """

    def __init__(self, gateway: RequestGateway) -> None:
        self.gateway = gateway

    async def get_all_contacts(self, limit: int = 10) -> list[Contact]:
        data = await self.gateway.request(
            CrmEndpoints.LIST_CONTACTS,
            params={"limit": limit},
        )
        return _parse(ListContactsResponse, data).results

    async def get_contact_by_id(self, contact_id: str) -> Contact:
        """Fetch one contact.

        Raises:
            CrmDomainError: If the envelope reports ``success: false``.
        """
        data = await self.gateway.request(CrmEndpoints.contact_info(contact_id))
        response = _parse(ContactInfoResponse, data)
        if not response.success or response.contact is None:
            raise CrmDomainError("Failed to fetch contact information")
        return response.contact

    async def update_contact_zip(self, contact_id: str, zip_code: str) -> UpdateZipResponse:
        body = UpdateZipRequest(zip=zip_code.strip())
        data = await self.gateway.request(
            CrmEndpoints.update_zip(contact_id),
            method="POST",
            json=body.model_dump(),
        )
        return _parse(UpdateZipResponse, data)

    async def update_contact_city(self, contact_id: str) -> UpdateCityResponse:
        # The server derives the city from the ZIP it has stored, so no ZIP
        # is sent here.
        data = await self.gateway.request(
            CrmEndpoints.update_city(contact_id),
            method="GET",
        )
        return _parse(UpdateCityResponse, data)

    async def update_zip_and_city(self, contact_id: str, zip_code: str) -> LocationUpdateResult:
        """Set a contact's ZIP, then have the server re-derive its city.

        The two calls are not atomic and nothing is rolled back. Whatever the
        outcome, callers must re-fetch the contact afterwards; local copies
        are never patched.

        Returns:
            LocationUpdateResult with outcome ``updated``, ``partial`` (ZIP
            committed, city not) or ``zip_rejected`` (city never attempted).

        Raises:
            ZipValidationError: If ``zip_code`` is blank or malformed. No
                request is made.
            ContactServiceError: Any gateway failure from either call.
        """
        zip_code = zip_code.strip()
        if not zip_code:
            raise ZipValidationError(ZIP_REQUIRED_MESSAGE)
        if not self.validate_zip_code(zip_code):
            raise ZipValidationError(ZIP_INVALID_MESSAGE)

        zip_result = await self.update_contact_zip(contact_id, zip_code)
        if not zip_result.success:
            logger.warning("ZIP update rejected for contact %s: %s", contact_id, zip_result.message)
            return LocationUpdateResult(
                outcome=LocationUpdateOutcome.ZIP_REJECTED,
                contact_id=contact_id,
                zip=zip_code,
                message=zip_result.message or "ZIP code update failed",
            )

        city_result = await self.update_contact_city(contact_id)
        if not city_result.success:
            logger.warning("City update failed for contact %s after ZIP %s was saved", contact_id, zip_code)
            return LocationUpdateResult(
                outcome=LocationUpdateOutcome.PARTIAL,
                contact_id=contact_id,
                zip=zip_code,
                message="ZIP code updated! City update failed - please try again.",
            )

        logger.info("Updated contact %s: zip=%s city=%s", contact_id, zip_code, city_result.city)
        return LocationUpdateResult(
            outcome=LocationUpdateOutcome.UPDATED,
            contact_id=contact_id,
            zip=zip_code,
            city=city_result.city,
            message=f"ZIP code updated to {zip_code} and city updated to {city_result.city}!",
        )

    @staticmethod
    def validate_zip_code(zip_code: str) -> bool:
        """True for ``12345`` or ``12345-6789`` after trimming whitespace."""
        return _ZIP_PATTERN.fullmatch(zip_code.strip()) is not None

    @staticmethod
    def get_contact_display_name(contact: Contact) -> str:
        first = contact.properties.firstname
        last = contact.properties.lastname
        if first and last:
            return f"{first} {last}"
        return first or last or UNNAMED_CONTACT

    @staticmethod
    def get_contact_initials(contact: Contact) -> str:
        initials = ""
        if contact.properties.firstname:
            initials += contact.properties.firstname[0].upper()
        if contact.properties.lastname:
            initials += contact.properties.lastname[0].upper()
        return initials or UNKNOWN_INITIAL

    @staticmethod
    def has_complete_location_data(contact: Contact) -> bool:
        return bool(contact.properties.zip and contact.properties.city)

    @staticmethod
    def format_date(date_string: str) -> str:
        """Render an ISO-8601 timestamp as e.g. ``Jan 5, 2024``."""
        try:
            parsed = datetime.fromisoformat(date_string)
        except (TypeError, ValueError):
            return INVALID_DATE
        month = _MONTH_ABBREVIATIONS[parsed.month - 1]
        return f"{month} {parsed.day}, {parsed.year}"
