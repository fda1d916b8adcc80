"""CRM client exceptions.

Every failure surfaced by the gateway or the contact service carries an
``ErrorKind`` tag. Callers branch on ``error.kind`` rather than on the
concrete class.
"""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    DOMAIN = "domain"
    VALIDATION = "validation"


class ContactServiceError(Exception):
    """Base exception for all contact service operations."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class CrmTransportError(ContactServiceError):
    """Raised when a request never produced a response (DNS, refused, timeout)."""

    kind = ErrorKind.TRANSPORT

    def __init__(self, message: str = "Network error occurred") -> None:
        super().__init__(message)


class CrmHTTPStatusError(ContactServiceError):
    """Raised when the CRM responds with a non-success HTTP status."""

    kind = ErrorKind.HTTP_STATUS

    def __init__(self, message: str, status: int, response: Any = None) -> None:
        self.status = status
        self.response = response
        super().__init__(message)


class CrmDomainError(ContactServiceError):
    """Raised when a successful HTTP response carries a failed payload."""

    kind = ErrorKind.DOMAIN


class ZipValidationError(ContactServiceError):
    """Raised before any network call when a ZIP code is blank or malformed."""

    kind = ErrorKind.VALIDATION
