"""Wrapper de httpx y Transport Client.

Por qué un wrapper:
- Estandariza timeouts, headers y logging de todas las llamadas salientes.
- Facilita testeo: el `httpx.AsyncClient` se puede sustituir por uno con
  `httpx.MockTransport`.
"""

from __future__ import annotations

import logging

import httpx

from core.config import AppSettings
from core.domain.errors import InvalidResponseError, InvalidURLError, RequestFailedError
from core.domain.models import TransportOutcome
from core.domain.requests import RequestDescriptor
from core.interfaces.transport import TransportClient

logger = logging.getLogger(__name__)

_ALLOWED_SCHEMES = ("http", "https")


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que todas las llamadas se comporten igual.
    - `transport` permite enchufar `httpx.MockTransport` en los tests.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def parse_target_url(url: str | None) -> httpx.URL:
    """Valida el destino de un descriptor. Lanza `InvalidURLError`."""

    if not url:
        raise InvalidURLError(url)
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as exc:
        raise InvalidURLError(url) from exc
    if parsed.scheme not in _ALLOWED_SCHEMES or not parsed.host:
        raise InvalidURLError(url)
    return parsed


class HttpxTransportClient(TransportClient):
    """Ejecuta un `RequestDescriptor` con exactamente una llamada httpx.

    Con `client` la sesión (y su ciclo de vida) es del llamador; sin él se crea
    un cliente a partir de `settings` en cada llamada.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client

    async def perform(self, descriptor: RequestDescriptor) -> TransportOutcome:
        url = parse_target_url(descriptor.url)

        if self._client is not None:
            return await self._send(self._client, descriptor, url)
        async with build_async_client(self._settings) as client:
            return await self._send(client, descriptor, url)

    async def _send(
        self,
        client: httpx.AsyncClient,
        descriptor: RequestDescriptor,
        url: httpx.URL,
    ) -> TransportOutcome:
        request = client.build_request(
            descriptor.method.value,
            url,
            headers=descriptor.headers,
            content=descriptor.body,
        )
        logger.debug("%s %s", request.method, request.url)

        try:
            response = await client.send(request)
        except httpx.RemoteProtocolError as exc:
            logger.warning("Non-HTTP response from %s: %s", request.url, exc)
            raise InvalidResponseError() from exc
        except httpx.HTTPError as exc:
            logger.warning("Request to %s failed: %r", request.url, exc)
            raise RequestFailedError(exc) from exc

        return TransportOutcome(
            content=response.content,
            status_code=response.status_code,
            headers=dict(response.headers),
        )
