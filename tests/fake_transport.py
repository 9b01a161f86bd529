"""Fake TransportClient for service-level tests.

Records every descriptor it receives and answers with a canned outcome or
raises a canned error. Mirrors the contract of `HttpxTransportClient`,
including the `InvalidURLError` check before any "network" activity.
"""

from __future__ import annotations

import json
from typing import Any

from adapters.http_client import parse_target_url
from core.domain.models import TransportOutcome
from core.domain.requests import RequestDescriptor


class FakeTransport:
    def __init__(
        self,
        *,
        status_code: int = 200,
        content: bytes = b"",
        error: BaseException | None = None,
    ) -> None:
        self.status_code = status_code
        self.content = content
        self.error = error
        self.calls: list[RequestDescriptor] = []

    @classmethod
    def json(cls, status_code: int, payload: Any) -> "FakeTransport":
        return cls(status_code=status_code, content=json.dumps(payload).encode())

    async def perform(self, descriptor: RequestDescriptor) -> TransportOutcome:
        parse_target_url(descriptor.url)
        self.calls.append(descriptor)
        if self.error is not None:
            raise self.error
        return TransportOutcome(content=self.content, status_code=self.status_code)
