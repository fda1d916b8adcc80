"""Request gateway: the single point of network access to the CRM service."""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from contact_manager.services.crm.exceptions import (
    CrmDomainError,
    CrmHTTPStatusError,
    CrmTransportError,
)

logger = logging.getLogger(__name__)

_DEFAULT_HEADERS: dict[str, str] = {"Content-Type": "application/json"}


def _contact_path(prefix: str, contact_id: str) -> str:
    return f"{prefix}/{quote(str(contact_id), safe='')}"


class CrmEndpoints:
    """Fixed endpoint templates of the CRM service."""

    LIST_CONTACTS = "/list-contacts"
    # Reserved; no contact operation calls it.
    GEOCODE = "/geocode"

    @staticmethod
    def contact_info(contact_id: str) -> str:
        return _contact_path("/contact-info", contact_id)

    @staticmethod
    def update_zip(contact_id: str) -> str:
        return _contact_path("/update-zip", contact_id)

    @staticmethod
    def update_city(contact_id: str) -> str:
        return _contact_path("/update-city", contact_id)


def _error_message(body: Any, status_code: int) -> str:
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, str) and error:
            return error
    return f"HTTP Error: {status_code}"


def handle_response(response: httpx.Response) -> Any:
    """Turn a CRM response into its decoded JSON body.

    Raises:
        CrmHTTPStatusError: If the status is not 2xx. The message is the
            body's ``error`` field when present, else ``HTTP Error: <status>``.
        CrmDomainError: If a 2xx response body is not valid JSON.
    """
    if not response.is_success:
        try:
            body = response.json()
        except ValueError:
            body = {}
        message = _error_message(body, response.status_code)
        logger.warning("CRM returned %d: %s", response.status_code, message)
        raise CrmHTTPStatusError(message, status=response.status_code, response=body)

    try:
        return response.json()
    except ValueError as exc:
        raise CrmDomainError("Malformed response payload") from exc


class RequestGateway:
    """Builds CRM URLs, attaches JSON headers and normalizes failures.

    Every failure leaves this class as a ``ContactServiceError`` subclass,
    wrapped exactly once. Nothing is retried; timeouts are httpx defaults.
    """

    def __init__(
        self,
        base_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._transport = transport

    def build_url(self, endpoint: str) -> str:
        return f"{self.base_url}{endpoint}"

    async def request(
        self,
        endpoint: str,
        *,
        method: str = "GET",
        params: dict[str, Any] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Issue a request and return the decoded JSON body.

        Caller headers override the defaults on conflict (case-insensitive).

        Raises:
            CrmTransportError: If no response was received.
            CrmHTTPStatusError: If the response status denotes failure.
            CrmDomainError: If a success body cannot be decoded.
        """
        url = self.build_url(endpoint)
        merged_headers = httpx.Headers(_DEFAULT_HEADERS)
        if headers:
            merged_headers.update(headers)

        logger.info("CRM request: %s %s", method, endpoint)
        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                response = await client.request(
                    method,
                    url,
                    params=params,
                    json=json,
                    headers=merged_headers,
                )
        except httpx.HTTPError as exc:
            logger.warning("CRM request %s %s failed: %s", method, endpoint, exc)
            raise CrmTransportError() from exc

        return handle_response(response)
