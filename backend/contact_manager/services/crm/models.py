"""CRM contact models.

Field names on the wire are camelCase; attributes are snake_case with
aliases so models validate from either form.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ContactProperties(BaseModel):
    # The CRM may return properties beyond the ones modelled here.
    model_config = ConfigDict(frozen=True, extra="allow")

    city: str | None = None
    zip: str | None = None
    firstname: str | None = None
    lastname: str | None = None
    createdate: str
    lastmodifieddate: str
    hs_object_id: str


class Contact(BaseModel):
    """A contact as held by the client. Replaced, never patched in place."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    properties: ContactProperties
    created_at: str = Field(..., alias="createdAt")
    updated_at: str = Field(..., alias="updatedAt")
    archived: bool = False


class ListContactsResponse(BaseModel):
    results: list[Contact] = Field(default_factory=list)


class ContactInfoResponse(BaseModel):
    success: bool
    contact: Contact | None = None


class UpdateZipRequest(BaseModel):
    zip: str


class UpdateZipResponse(BaseModel):
    """Envelope of the ZIP write.

    Only ``success`` drives the update sequence. The echoed contact is kept
    as received since the ZIP is already committed when it arrives.
    """

    success: bool
    message: str | None = None
    contact: dict[str, Any] | None = None


class UpdateCityResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    contact_id: str | None = Field(None, alias="contactId")
    zip: str | None = None
    city: str | None = None
    message: str | None = None


class LocationUpdateOutcome(str, Enum):
    UPDATED = "updated"
    PARTIAL = "partial"  # ZIP committed, city not re-derived
    ZIP_REJECTED = "zip_rejected"


class LocationUpdateResult(BaseModel):
    """Result of the ZIP-then-city update sequence.

    ``requires_refresh`` is always true: whatever the outcome, the caller
    must re-fetch the contact to reconcile with the server.
    """

    outcome: LocationUpdateOutcome
    contact_id: str
    zip: str
    city: str | None = None
    message: str = ""
    requires_refresh: bool = True
