"""Contrato del Transport Client.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que los servicios corran contra httpx o un doble de test sin
  saber cuál.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import TransportOutcome
from core.domain.requests import RequestDescriptor


@runtime_checkable
class TransportClient(Protocol):
    """Ejecuta un descriptor contra la red.

    Reglas de diseño:
    - Devuelve un `TransportOutcome` para cualquier status HTTP; la semántica
      del status es cosa del Classifier.
    - Lanza `InvalidURLError`, `RequestFailedError` o `InvalidResponseError`.
    - No guarda estado entre llamadas salvo la configuración.
    """

    async def perform(self, descriptor: RequestDescriptor) -> TransportOutcome:
        ...
