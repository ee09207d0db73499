from __future__ import annotations

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
from .mybusybee_client import MyBusyBeeClient

logger = logging.getLogger(__name__)

SUCCESS_PREFIX = "api_"

STATUS_ERRORS = {
    "1001": InvalidApiKeyException,
    "1003": InvalidSenderNameException,
    "1004": InvalidSenderNameException,
    "1005": InvalidMessageException,
    "1008": InvalidMobileNumberException,
    "1009": InsufficientCreditsException,
}


class MyBusyBeeSMSProvider(BaseSMSProvider):
    """MyBusyBee implementation of the SMS provider interface.

    The API answers in plain text; the first four characters are either a
    numeric status code or ``api_`` for an accepted message.
    """

    name = "mybusybee"

    def __init__(self, credentials: Any, *, client: MyBusyBeeClient | None = None):
        super().__init__(credentials)
        self.client = client or MyBusyBeeClient(self.credentials.api_key)

    def send(self, recipients: Recipients, message: str, sender_name: Optional[str] = None) -> str:
        try:
            result = self.client.send(recipients, message, sender_name)
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "MyBusyBee rejected SMS send request | status=%s",
                exc.response.status_code,
            )
            raise SmsSendingException(exc.response.text) from exc
        except httpx.HTTPError as exc:
            logger.exception("MyBusyBee SMS sending failed")
            raise SmsSendingException(f"MyBusyBee request failed: {exc}") from exc

        status = result[:4]
        if status == SUCCESS_PREFIX:
            return result

        error_cls = STATUS_ERRORS.get(status, SmsSendingException)
        logger.warning("MyBusyBee reported an error | status=%s | body=%s", status, result)
        raise error_cls(result)
