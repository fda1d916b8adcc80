"""Pydantic schemas for the contacts API consumed by the browser UI."""

from pydantic import BaseModel, Field


class ContactSummary(BaseModel):
    """One row of the contact list."""

    id: str
    display_name: str
    initials: str
    zip: str | None = None
    city: str | None = None
    has_complete_location: bool


class ContactDetailResponse(ContactSummary):
    """Full contact detail returned by GET /contacts/{contact_id}."""

    firstname: str | None = None
    lastname: str | None = None
    created_at: str
    updated_at: str
    updated_at_display: str = Field(..., description="Short human-readable form of updated_at")
    archived: bool


class LocationUpdateRequest(BaseModel):
    """POST body for the ZIP-then-city update.

    Format is checked by the service so that blank and malformed values
    get their own messages.
    """

    zip: str = Field(..., max_length=20)
