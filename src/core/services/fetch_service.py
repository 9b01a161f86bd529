"""Fetch orchestration: Transport Client + Classifier as one async operation.

This module composes the two halves of the pipeline so resource-specific
services (users, ...) only build descriptors. Each invocation issues one
request and yields exactly one outcome, a value or a taxonomy error. No local
recovery or retry happens here; failures reach the consumer unchanged.
"""

from __future__ import annotations

import logging
from typing import Any

from core.domain.errors import FetchError
from core.domain.requests import RequestDescriptor
from core.domain.result import FetchResult
from core.interfaces.transport import TransportClient
from core.services.channel import SingleEmissionChannel
from core.services.response_classifier import classify

logger = logging.getLogger(__name__)


class FetchService:
    """Runs descriptors through a `TransportClient` and the Classifier."""

    def __init__(self, transport: TransportClient) -> None:
        self._transport = transport

    async def fetch(self, descriptor: RequestDescriptor) -> FetchResult[Any]:
        try:
            outcome = await self._transport.perform(descriptor)
            logger.debug("Received response with status code %s", outcome.status_code)
            value = classify(outcome, descriptor)
        except FetchError as exc:
            logger.warning("Fetch of %s failed (%s): %s", descriptor.url, exc.kind.value, exc)
            return FetchResult.failure(exc)
        return FetchResult.success(value)

    def publish(self, descriptor: RequestDescriptor) -> SingleEmissionChannel[Any]:
        """Start `fetch` on the running loop and expose it as a channel.

        Must be called from a coroutine; the emission is delivered on that loop.
        """

        return SingleEmissionChannel.from_awaitable(self.fetch(descriptor))
