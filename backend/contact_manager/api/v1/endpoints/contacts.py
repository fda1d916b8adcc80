"""Contacts API — list, detail and ZIP/city update backed by the remote CRM."""

import logging
from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException, Query

from contact_manager.core.config import settings
from contact_manager.schemas.contacts import (
    ContactDetailResponse,
    ContactSummary,
    LocationUpdateRequest,
)
from contact_manager.services.crm import (
    Contact,
    ContactService,
    ContactServiceError,
    ErrorKind,
    LocationUpdateResult,
    get_contact_service,
)

logger = logging.getLogger(__name__)

router = APIRouter()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _raise_http_error(exc: ContactServiceError) -> NoReturn:
    """Map a tagged service error onto an HTTP error for the UI."""
    match exc.kind:
        case ErrorKind.VALIDATION:
            status_code = 422
        case ErrorKind.HTTP_STATUS if 400 <= exc.status < 500:
            status_code = exc.status
        case _:
            # Upstream CRM unreachable or misbehaving
            status_code = 502
    raise HTTPException(status_code=status_code, detail=exc.message) from exc


def _contact_to_summary(contact: Contact) -> ContactSummary:
    return ContactSummary(
        id=contact.id,
        display_name=ContactService.get_contact_display_name(contact),
        initials=ContactService.get_contact_initials(contact),
        zip=contact.properties.zip,
        city=contact.properties.city,
        has_complete_location=ContactService.has_complete_location_data(contact),
    )


def _contact_to_detail(contact: Contact) -> ContactDetailResponse:
    summary = _contact_to_summary(contact)
    return ContactDetailResponse(
        **summary.model_dump(),
        firstname=contact.properties.firstname,
        lastname=contact.properties.lastname,
        created_at=contact.created_at,
        updated_at=contact.updated_at,
        updated_at_display=ContactService.format_date(contact.updated_at),
        archived=contact.archived,
    )


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


@router.get("", response_model=list[ContactSummary])
@router.get("/", response_model=list[ContactSummary], include_in_schema=False)
async def list_contacts(
    limit: int = Query(
        settings.CONTACT_LIST_DEFAULT_LIMIT,
        ge=1,
        le=settings.CONTACT_LIST_MAX_LIMIT,
    ),
    service: ContactService = Depends(get_contact_service),
):
    """List contacts in CRM order."""
    try:
        contacts = await service.get_all_contacts(limit)
    except ContactServiceError as exc:
        logger.warning("Listing contacts failed: %s", exc.message)
        _raise_http_error(exc)
    return [_contact_to_summary(c) for c in contacts]


@router.get("/{contact_id}", response_model=ContactDetailResponse)
async def get_contact(
    contact_id: str,
    service: ContactService = Depends(get_contact_service),
):
    """Get a single contact by ID."""
    try:
        contact = await service.get_contact_by_id(contact_id)
    except ContactServiceError as exc:
        logger.warning("Fetching contact %s failed: %s", contact_id, exc.message)
        _raise_http_error(exc)
    return _contact_to_detail(contact)


@router.post("/{contact_id}/location", response_model=LocationUpdateResult)
async def update_location(
    contact_id: str,
    payload: LocationUpdateRequest,
    service: ContactService = Depends(get_contact_service),
):
    """Set the contact's ZIP code, then have the CRM re-derive its city.

    A ``partial`` outcome (ZIP saved, city not) is a 200, not an error.
    The UI must re-fetch the contact and the list after every call.
    """
    try:
        return await service.update_zip_and_city(contact_id, payload.zip)
    except ContactServiceError as exc:
        logger.warning("Location update for contact %s failed: %s", contact_id, exc.message)
        _raise_http_error(exc)
