"""Declarative request descriptors.

A `RequestDescriptor` says *what* to call and *how* to decode the answer; it
never performs I/O. The Transport Client executes it and the Classifier uses
its `response_model`/`key_decoding` to decode the body.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping
from urllib.parse import quote

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from core.domain.models import GitHubUser


class HTTPMethod(str, Enum):
    """Methods a descriptor may use."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class KeyDecoding(str, Enum):
    """How JSON keys map onto the schema's field names."""

    CONVERT_FROM_SNAKE_CASE = "convert_from_snake_case"
    USE_DEFAULT_KEYS = "use_default_keys"


class RequestDescriptor(BaseModel):
    """Immutable description of one HTTP call and its expected success type."""

    model_config = ConfigDict(frozen=True)

    url: str | None = Field(
        default=None,
        description="Absolute target URL. Missing means the request cannot be sent.",
    )
    method: HTTPMethod = Field(
        default=HTTPMethod.GET,
        description="HTTP method.",
    )
    headers: Mapping[str, str] | None = Field(
        default=None,
        description="Extra request headers, read-only once built.",
    )
    body: bytes | None = Field(
        default=None,
        description="Raw request body.",
    )
    response_model: type[BaseModel] = Field(
        ...,
        description="Schema a 2xx body is decoded into.",
    )
    key_decoding: KeyDecoding = Field(
        default=KeyDecoding.CONVERT_FROM_SNAKE_CASE,
        description="Key mapping applied to the 2xx body before validation.",
    )

    @field_validator("headers")
    @classmethod
    def check_headers(cls, value: Mapping[str, str] | None) -> Mapping[str, str] | None:
        """Header names and values must be single-line ASCII; the result is read-only."""

        if value is None:
            return None
        for name, header_value in value.items():
            for text in (name, header_value):
                if not text.isascii() or "\r" in text or "\n" in text:
                    raise ValueError(f"header {name!r} must be single-line ASCII")
        return MappingProxyType(dict(value))


def build_get_user_request(username: str, *, base_url: str) -> RequestDescriptor:
    """Descriptor for `GET <base_url>/users/<username>`.

    A blank username produces a descriptor without target.
    """

    username = username.strip()
    url = None
    if username:
        url = f"{base_url.rstrip('/')}/users/{quote(username, safe='')}"
    return RequestDescriptor(url=url, method=HTTPMethod.GET, response_model=GitHubUser)
