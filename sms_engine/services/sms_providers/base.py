from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union

from ...core.phone import normalize_mobile
from ..exceptions import (
    InvalidArgumentException,
    InvalidMessageException,
    InvalidMobileNumberException,
    InvalidSenderNameException,
    MaxSmsRecipientReachedException,
)

MAX_RECIPIENTS = 1000

Recipients = Union[str, Iterable[str]]


@dataclass(frozen=True, slots=True)
class ApiCredentials:
    """API key accepted by every provider."""

    api_key: str

    @classmethod
    def from_input(cls, value: Any) -> ApiCredentials:
        """Accept a bare key string or a mapping holding ``api_key``."""
        if isinstance(value, ApiCredentials):
            return value
        if isinstance(value, Mapping):
            if "api_key" not in value:
                raise InvalidArgumentException("Missing `api_key` value in mapping")
            value = value["api_key"]
        if not isinstance(value, str) or not value.strip():
            raise InvalidArgumentException("API key must be a non-empty string")
        return cls(api_key=value)


def split_recipients(recipients: Recipients) -> list[str]:
    if recipients is None:
        return [""]
    if isinstance(recipients, str):
        return [item.strip() for item in recipients.split(",")]
    items = [str(item).strip() for item in recipients]
    return items or [""]


def validate_send_request(
    recipients: Recipients,
    message: Optional[str],
    sender_name: Optional[str] = None,
    *,
    require_sender_name: bool = False,
    sender_name_hint: str = "Sender name is required.",
) -> list[str]:
    """Check a send request and return the canonical recipient numbers.

    Fails fast on the first problem, in this order: recipient count, each
    recipient number, blank message, missing sender name.
    """
    entries = split_recipients(recipients)
    if len(entries) > MAX_RECIPIENTS:
        raise MaxSmsRecipientReachedException(
            f"API is limited to sending to {MAX_RECIPIENTS} recipients at a time"
        )

    numbers: list[str] = []
    for entry in entries:
        normalized = normalize_mobile(entry)
        if normalized is None:
            raise InvalidMobileNumberException(f"Invalid mobile number: `{entry}`")
        numbers.append(normalized)

    if message is None or not str(message).strip():
        raise InvalidMessageException("Message can't be blank")

    if require_sender_name and sender_name is None:
        raise InvalidSenderNameException(sender_name_hint)

    return numbers


class BaseSMSProvider(ABC):
    """Interface all SMS providers must implement."""

    name: str

    def __init__(self, credentials: Any):
        self.credentials = ApiCredentials.from_input(credentials)

    @abstractmethod
    def send(self, recipients: Recipients, message: str, sender_name: Optional[str] = None) -> Any:
        """Send ``message`` to ``recipients``; return the provider's success payload."""
        raise NotImplementedError

    def close(self) -> None:
        """Release the HTTP connection pool of the wrapped client, if any."""
        client = getattr(self, "client", None)
        if client is not None:
            client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
