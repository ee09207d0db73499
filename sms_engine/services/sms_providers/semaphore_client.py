from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional

import httpx

from ...core.config import get_settings
from .base import Recipients, validate_send_request

logger = logging.getLogger(__name__)


class SemaphoreClient:
    """Thin HTTP client for the Semaphore v4 API.

    Every request carries ``apikey`` as a query parameter. Methods return the
    raw response body; a non-2xx status raises ``httpx.HTTPStatusError``.
    """

    MESSAGE_FILTERS = ("limit", "page", "startDate", "endDate", "status", "network", "sendername")
    DEFAULT_PAGE_SIZE = 100

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        settings = get_settings()
        self.api_key = api_key
        self.default_sender_name = settings.SEMAPHORE_DEFAULT_SENDER_NAME
        self._client = httpx.Client(
            base_url=base_url or settings.SEMAPHORE_API_BASE,
            params={"apikey": api_key},
            timeout=timeout if timeout is not None else settings.SMS_HTTP_TIMEOUT,
            transport=transport,
        )

    def _request(self, method: str, path: str, **kwargs: Any) -> str:
        logger.debug("Semaphore request | method=%s | path=%s", method, path)
        response = self._client.request(method, path, **kwargs)
        logger.debug(
            "Semaphore response | method=%s | path=%s | status=%s",
            method,
            path,
            response.status_code,
        )
        response.raise_for_status()
        return response.text

    def send(self, recipients: Recipients, message: str, sender_name: Optional[str] = None) -> str:
        """Send SMS message(s).

        Args:
            recipients: One number, a comma-joined string, or a sequence of numbers.
            message: Message text.
            sender_name: Optional approved sender name; falls back to the
                configured default (``SEMAPHORE``).
        """
        numbers = validate_send_request(recipients, message, sender_name)
        form = {
            "apikey": self.api_key,
            "message": message,
            "number": ",".join(numbers),
            "sendername": sender_name or self.default_sender_name,
        }
        return self._request("POST", "messages", data=form)

    def balance(self) -> str:
        """Check the balance of the account."""
        return self._request("GET", "account")

    def account(self) -> str:
        return self._request("GET", "account")

    def message(self, message_id: str | int) -> str:
        """Retrieve data about a specific message."""
        return self._request("GET", f"messages/{message_id}")

    def messages(self, options: Mapping[str, Any] | None = None) -> str:
        """Retrieve up to 100 messages, offset by page.

        ``options`` may hold limit, page, startDate, endDate, status, network
        and sendername; anything else is ignored.
        """
        params: dict[str, Any] = {"limit": self.DEFAULT_PAGE_SIZE, "page": 1}
        for key in self.MESSAGE_FILTERS:
            if options and key in options:
                params[key] = options[key]
        return self._request("GET", "messages", params=params)

    def users(self) -> str:
        return self._request("GET", "account/users")

    def sendernames(self) -> str:
        return self._request("GET", "account/sendernames")

    def transactions(self) -> str:
        return self._request("GET", "account/transactions")

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "SemaphoreClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
