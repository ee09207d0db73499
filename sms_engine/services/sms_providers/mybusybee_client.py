from __future__ import annotations

import logging
from typing import Optional

import httpx

from ...core.config import get_settings
from .base import Recipients, validate_send_request

logger = logging.getLogger(__name__)

SENDER_ID_REQUIRED = (
    "Sender ID is required for MyBusyBee.\n\n"
    "Use an approved Sender ID in your account in this link: "
    "https://cloud.mybusybee.net/app/senderID"
)


class MyBusyBeeClient:
    """HTTP client for the MyBusyBee SMS API (plain-text responses)."""

    SEND_PATH = "index.php"

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
        self._client = httpx.Client(
            base_url=base_url or settings.MYBUSYBEE_API_BASE,
            timeout=timeout if timeout is not None else settings.SMS_HTTP_TIMEOUT,
            transport=transport,
        )

    def send(self, recipients: Recipients, message: str, sender_name: Optional[str] = None) -> str:
        numbers = validate_send_request(
            recipients,
            message,
            sender_name,
            require_sender_name=True,
            sender_name_hint=SENDER_ID_REQUIRED,
        )
        query = {
            "key": self.api_key,
            "contacts": ",".join(numbers),
            "senderid": sender_name,
            "msg": message,
        }
        logger.debug("MyBusyBee request | recipients=%s", len(numbers))
        response = self._client.post(self.SEND_PATH, params=query)
        logger.debug("MyBusyBee response | status=%s", response.status_code)
        response.raise_for_status()
        return response.text

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "MyBusyBeeClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
