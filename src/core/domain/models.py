"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Los diagnósticos de decodificación (campo faltante, tipo incorrecto) vienen
  gratis como `ValidationError`, que el Classifier conserva como causa.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict


class GitHubUser(BaseModel):
    """Perfil público de GitHub.

    Los nombres del esquema son camelCase (`avatarUrl`); el wire usa snake_case
    y el Classifier lo convierte antes de validar. Los atributos Python siguen
    en snake_case (`user.avatar_url`).
    """

    model_config = ConfigDict(alias_generator=to_camel, extra="ignore", frozen=True)

    login: str = Field(
        ...,
        description="Handle de la cuenta.",
    )
    avatar_url: str = Field(
        ...,
        description="URL pública de la imagen de avatar.",
    )
    bio: str | None = Field(
        default=None,
        description="Bio pública, null si el usuario no tiene.",
    )


class ServerErrorPayload(BaseModel):
    """Cuerpo de error estructurado que un servidor puede devolver en respuestas no-2xx."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    code: int = Field(..., description="Código de error de la aplicación.")
    message: str = Field(..., description="Diagnóstico legible.")


@dataclass(frozen=True)
class TransportOutcome:
    """Resultado crudo de un round-trip de red completado, sea cual sea el status."""

    content: bytes
    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
