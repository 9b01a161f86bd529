"""Root conftest: shared settings and an httpx client backed by MockTransport."""

from __future__ import annotations

import os
from typing import Callable

import httpx
import pytest

from adapters.http_client import build_async_client
from core.config import AppSettings

# Keep tests away from any developer .env / real API.
os.environ.setdefault("USERFETCH_API_BASE_URL", "https://api.test")
os.environ.setdefault("USERFETCH_LOG_LEVEL", "WARNING")

API_BASE_URL = "https://api.test"


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(api_base_url=API_BASE_URL, http_timeout_seconds=5.0, user_agent="userfetch-tests")


@pytest.fixture
def mock_client(settings: AppSettings) -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.AsyncClient]:
    """Factory: `mock_client(handler)` -> AsyncClient answering through `handler`."""

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        return build_async_client(settings, transport=httpx.MockTransport(handler))

    return factory
