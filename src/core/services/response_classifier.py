"""Response classification and decoding.

Turns a `TransportOutcome` into a typed value or a taxonomy error:

- 2xx: decode the body as the descriptor's `response_model`. Any failure is a
  `DecodingError` that keeps the JSON/pydantic diagnostic.
- anything else: try the `{code, message}` error payload first; when the body
  is not that (HTML page, empty body) fall back to the HTTP status. A non-2xx
  response is always a `ServerError`, never a `DecodingError`.
"""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from core.domain.errors import DecodingError, ServerError
from core.domain.models import ServerErrorPayload, TransportOutcome
from core.domain.requests import KeyDecoding, RequestDescriptor

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def convert_keys_from_snake_case(data: Any) -> Any:
    """Recursively rename `snake_case` dict keys to `camelCase`.

    Keys without an underscore are left untouched.
    """

    if isinstance(data, dict):
        return {
            (to_camel(k) if isinstance(k, str) and "_" in k else k): convert_keys_from_snake_case(v)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [convert_keys_from_snake_case(item) for item in data]
    return data


def decode_payload(
    content: bytes,
    model: type[ModelT],
    key_decoding: KeyDecoding = KeyDecoding.USE_DEFAULT_KEYS,
) -> ModelT:
    """Decode a JSON body into `model`.

    Raises `ValueError` (`json.JSONDecodeError`, `UnicodeDecodeError` or
    pydantic's `ValidationError`) when the body does not fit. A body nested
    too deeply to parse is a `ValueError` too.
    """

    try:
        data = json.loads(content)
        if key_decoding is KeyDecoding.CONVERT_FROM_SNAKE_CASE:
            data = convert_keys_from_snake_case(data)
    except RecursionError as exc:
        raise ValueError("JSON body is nested too deeply") from exc
    return model.model_validate(data)


def is_success(status_code: int) -> bool:
    return 200 <= status_code <= 299


def classify(outcome: TransportOutcome, descriptor: RequestDescriptor) -> BaseModel:
    """Return the decoded success value or raise a taxonomy error."""

    status = outcome.status_code
    if is_success(status):
        try:
            return decode_payload(outcome.content, descriptor.response_model, descriptor.key_decoding)
        except ValueError as exc:
            logger.warning("Could not decode %s body as %s", status, descriptor.response_model.__name__)
            raise DecodingError(exc) from exc

    try:
        payload = decode_payload(outcome.content, ServerErrorPayload)
    except ValueError:
        logger.debug("Status %s body is not an error payload, using the status code", status)
        raise ServerError.from_status(status) from None
    raise ServerError(payload.code, payload.message)
