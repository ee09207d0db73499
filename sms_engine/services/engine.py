from __future__ import annotations

import inspect
import logging
import threading
from collections.abc import Mapping
from typing import Any

from ..core.config import get_settings
from .exceptions import InvalidArgumentException, UnknownSupplierException
from .sms_providers import BaseSMSProvider, MyBusyBeeSMSProvider, SemaphoreSMSProvider

logger = logging.getLogger(__name__)

BUILTIN_SUPPLIERS: dict[str, type[BaseSMSProvider]] = {
    SemaphoreSMSProvider.name: SemaphoreSMSProvider,
    MyBusyBeeSMSProvider.name: MyBusyBeeSMSProvider,
}


class SupplierRegistry:
    """Maps supplier names to provider classes."""

    def __init__(self, suppliers: Mapping[str, type[BaseSMSProvider]] | None = None):
        self._lock = threading.Lock()
        self._suppliers: dict[str, type[BaseSMSProvider]] = {}
        for name, provider_cls in (suppliers or {}).items():
            self.register(name, provider_cls)

    def register(self, name: str, provider_cls: Any) -> None:
        if not isinstance(name, str) or not name:
            raise InvalidArgumentException("Supplier name must be a non-empty string")
        if not isinstance(provider_cls, type) or not issubclass(provider_cls, BaseSMSProvider):
            raise InvalidArgumentException(
                f"{provider_cls!r} must implement {BaseSMSProvider.__name__}"
            )
        if inspect.isabstract(provider_cls):
            missing = ", ".join(sorted(provider_cls.__abstractmethods__))
            raise InvalidArgumentException(
                f"{provider_cls.__name__} does not implement: {missing}"
            )
        with self._lock:
            if name in self._suppliers:
                logger.info("Replacing SMS supplier | name=%s | class=%s", name, provider_cls.__name__)
            self._suppliers[name] = provider_cls

    def get(self, name: str) -> type[BaseSMSProvider]:
        with self._lock:
            provider_cls = self._suppliers.get(name)
            known = sorted(self._suppliers)
        if provider_cls is None:
            raise UnknownSupplierException(
                f"Unknown SMS supplier `{name}`. Known suppliers: {', '.join(known) or 'none'}"
            )
        return provider_cls

    def create(self, name: str, credentials: Any, **kwargs: Any) -> BaseSMSProvider:
        provider_cls = self.get(name)
        logger.debug("Initialising SMS supplier | name=%s", name)
        return provider_cls(credentials, **kwargs)

    def names(self) -> list[str]:
        with self._lock:
            return list(self._suppliers)

    def as_dict(self) -> dict[str, type[BaseSMSProvider]]:
        with self._lock:
            return dict(self._suppliers)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._suppliers


default_registry = SupplierRegistry(BUILTIN_SUPPLIERS)


def get_suppliers() -> dict[str, type[BaseSMSProvider]]:
    return default_registry.as_dict()


def init(supplier: str, credentials: Any, **kwargs: Any) -> BaseSMSProvider:
    """Build the provider registered as ``supplier`` with the given credentials."""
    return default_registry.create(supplier, credentials, **kwargs)


def register_supplier(name: str, provider_cls: Any) -> None:
    default_registry.register(name, provider_cls)


def init_from_settings(registry: SupplierRegistry | None = None) -> BaseSMSProvider:
    """Build the provider named by ``SMS_SUPPLIER`` using ``SMS_API_KEY``."""
    settings = get_settings()
    if not settings.SMS_SUPPLIER:
        raise InvalidArgumentException("SMS_SUPPLIER is not configured")
    if not settings.SMS_API_KEY:
        raise InvalidArgumentException("SMS_API_KEY is not configured")
    return (registry or default_registry).create(settings.SMS_SUPPLIER, settings.SMS_API_KEY)
