import os
import sys
from pathlib import Path

import httpx
import pytest

BASE_DIR = Path(__file__).resolve().parents[1]
if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))

os.environ.setdefault("SEMAPHORE_API_BASE", "http://semaphore.test/api/v4/")
os.environ.setdefault("MYBUSYBEE_API_BASE", "http://mybusybee.test/app/smsapi/")
os.environ.setdefault("SMS_HTTP_TIMEOUT", "5")
os.environ.setdefault("LOG_LEVEL", "debug")

from sms_engine.core.config import get_settings

get_settings.cache_clear()


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler):
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture()
def settings_env(monkeypatch):
    """Set environment variables and rebuild the cached settings."""

    def _apply(**values):
        for key, value in values.items():
            monkeypatch.setenv(key, value)
        get_settings.cache_clear()
        return get_settings()

    yield _apply
    get_settings.cache_clear()


@pytest.fixture()
def recording_transport():
    def _build(status_code: int = 200, *, text: str | None = None, json_body=None):
        def _handler(request: httpx.Request) -> httpx.Response:
            if json_body is not None:
                return httpx.Response(status_code, json=json_body)
            return httpx.Response(status_code, text=text or "")

        return RecordingTransport(_handler)

    return _build


@pytest.fixture()
def failing_transport():
    def _handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connect fail", request=request)

    return RecordingTransport(_handler)
