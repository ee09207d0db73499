from __future__ import annotations

import json
import logging
from typing import Any, Optional

import httpx

from ..exceptions import (
    InsufficientCreditsException,
    InvalidApiKeyException,
    InvalidMessageException,
    InvalidMobileNumberException,
    InvalidSenderNameException,
    SmsSendingException,
)
from .base import BaseSMSProvider, Recipients
from .semaphore_client import SemaphoreClient

logger = logging.getLogger(__name__)

INSUFFICIENT_BALANCE_PREFIX = '["Your current balance of'

# Checked in this order; the first key present wins.
FIELD_ERRORS = (
    ("number", InvalidMobileNumberException),
    ("message", InvalidMessageException),
    ("sendername", InvalidSenderNameException),
    ("apikey", InvalidApiKeyException),
)


class SemaphoreSMSProvider(BaseSMSProvider):
    """Semaphore implementation of the SMS provider interface."""

    name = "semaphore"

    def __init__(self, credentials: Any, *, client: SemaphoreClient | None = None):
        super().__init__(credentials)
        self.client = client or SemaphoreClient(self.credentials.api_key)

    def send(self, recipients: Recipients, message: str, sender_name: Optional[str] = None) -> Any:
        try:
            body = self.client.send(recipients, message, sender_name)
        except httpx.HTTPStatusError as exc:
            error = exc.response.text
            logger.warning(
                "Semaphore rejected SMS send request | status=%s | body=%s",
                exc.response.status_code,
                error,
            )
            if exc.response.is_server_error and error.startswith(INSUFFICIENT_BALANCE_PREFIX):
                raise InsufficientCreditsException(error) from exc
            raise SmsSendingException(error) from exc
        except httpx.HTTPError as exc:
            logger.exception("Semaphore SMS sending failed")
            raise SmsSendingException(f"Semaphore request failed: {exc}") from exc

        try:
            result = json.loads(body)
        except ValueError as exc:
            raise SmsSendingException(body) from exc

        # Single and bulk sends are both acknowledged with a list of messages.
        if isinstance(result, list):
            return result

        if isinstance(result, dict):
            for field, error_cls in FIELD_ERRORS:
                if field in result:
                    payload = json.dumps(result)
                    logger.warning("Semaphore reported invalid %s | body=%s", field, payload)
                    raise error_cls(payload)

        # Unrecognized shapes are passed through as success.
        return result
