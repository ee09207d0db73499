import pytest

import sms_engine
from sms_engine.services import engine
from sms_engine.services.engine import SupplierRegistry
from sms_engine.services.exceptions import InvalidArgumentException, UnknownSupplierException
from sms_engine.services.sms_providers import (
    BaseSMSProvider,
    MyBusyBeeSMSProvider,
    SemaphoreSMSProvider,
)


class EchoProvider(BaseSMSProvider):
    name = "echo"

    def __init__(self, credentials, *, client=None):
        super().__init__(credentials)
        self.sent = []

    def send(self, recipients, message, sender_name=None):
        self.sent.append((recipients, message, sender_name))
        return {"echo": message}


class NotAProvider:
    def send(self, recipients, message, sender_name=None):
        return None


@pytest.fixture()
def registry():
    return SupplierRegistry(engine.BUILTIN_SUPPLIERS)


def test_builtin_suppliers_are_registered():
    suppliers = sms_engine.get_suppliers()
    assert suppliers["semaphore"] is SemaphoreSMSProvider
    assert suppliers["mybusybee"] is MyBusyBeeSMSProvider


def test_init_builds_provider_from_bare_key():
    provider = sms_engine.init("semaphore", "sema-key")
    try:
        assert isinstance(provider, SemaphoreSMSProvider)
        assert provider.credentials.api_key == "sema-key"
    finally:
        provider.client.close()


def test_init_builds_provider_from_mapping():
    provider = sms_engine.init("mybusybee", {"api_key": "bee-key"})
    try:
        assert isinstance(provider, MyBusyBeeSMSProvider)
        assert provider.client.api_key == "bee-key"
    finally:
        provider.client.close()


def test_unknown_supplier_raises_lookup_error(registry):
    with pytest.raises(UnknownSupplierException, match="nexmo") as exc_info:
        registry.create("nexmo", "key")
    assert isinstance(exc_info.value, LookupError)
    assert "semaphore" in str(exc_info.value)


def test_register_rejects_non_conforming_classes(registry):
    for candidate in (NotAProvider, EchoProvider("key"), "EchoProvider", None):
        with pytest.raises(InvalidArgumentException):
            registry.register("bad", candidate)
    assert "bad" not in registry


def test_register_rejects_empty_name(registry):
    with pytest.raises(InvalidArgumentException):
        registry.register("", EchoProvider)


def test_registered_supplier_receives_sends(registry):
    registry.register("echo", EchoProvider)
    provider = registry.create("echo", {"api_key": "k"})

    assert provider.send("09171234567", "ping") == {"echo": "ping"}
    assert provider.sent == [("09171234567", "ping", None)]


def test_register_overwrites_existing_name(registry):
    registry.register("semaphore", EchoProvider)
    assert registry.get("semaphore") is EchoProvider


def test_registries_are_isolated(registry):
    registry.register("echo", EchoProvider)
    assert "echo" in registry
    assert "echo" not in SupplierRegistry()
    assert SupplierRegistry().names() == []


def test_module_level_register_supplier(monkeypatch):
    monkeypatch.setattr(engine, "default_registry", SupplierRegistry(engine.BUILTIN_SUPPLIERS))

    sms_engine.register_supplier("echo", EchoProvider)
    provider = sms_engine.init("echo", "key")

    assert isinstance(provider, EchoProvider)
    assert sorted(sms_engine.get_suppliers()) == ["echo", "mybusybee", "semaphore"]


def test_module_level_register_supplier_rejects_plain_class(monkeypatch):
    monkeypatch.setattr(engine, "default_registry", SupplierRegistry(engine.BUILTIN_SUPPLIERS))
    with pytest.raises(InvalidArgumentException):
        sms_engine.register_supplier("plain", NotAProvider)


def test_init_from_settings(settings_env, registry):
    registry.register("echo", EchoProvider)
    settings_env(SMS_SUPPLIER="echo", SMS_API_KEY="from-env")

    provider = engine.init_from_settings(registry)

    assert isinstance(provider, EchoProvider)
    assert provider.credentials.api_key == "from-env"


def test_init_from_settings_requires_supplier(settings_env, monkeypatch):
    monkeypatch.delenv("SMS_SUPPLIER", raising=False)
    settings_env(SMS_API_KEY="from-env")
    with pytest.raises(InvalidArgumentException, match="SMS_SUPPLIER"):
        engine.init_from_settings()


class PartialProvider(BaseSMSProvider):
    name = "partial"


def test_register_rejects_provider_without_send(registry):
    with pytest.raises(InvalidArgumentException, match="send"):
        registry.register("partial", PartialProvider)
    assert "partial" not in registry


def test_provider_from_init_can_be_closed():
    with sms_engine.init("mybusybee", "bee-key") as provider:
        assert not provider.client._client.is_closed
    assert provider.client._client.is_closed


def test_close_without_client_is_noop():
    provider = EchoProvider("key")
    provider.close()
