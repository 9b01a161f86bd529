"""Error taxonomy of the fetch pipeline.

Every failure a fetch can produce (bad target, transport, protocol, decoding,
server reported) is one of these classes. Consumers branch on `kind` or on the
class and show `description` to the user.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Stable identifiers for each failure kind."""

    INVALID_URL = "invalid_url"
    REQUEST_FAILED = "request_failed"
    INVALID_RESPONSE = "invalid_response"
    DECODING_ERROR = "decoding_error"
    SERVER_ERROR = "server_error"
    NO_RESPONSE = "no_response"


class FetchError(Exception):
    """Base class for every taxonomy error."""

    kind: ErrorKind

    @property
    def description(self) -> str:
        """Human readable message for the consumer."""

        return str(self)


class InvalidURLError(FetchError):
    """The descriptor target is missing or malformed. No call was attempted."""

    kind = ErrorKind.INVALID_URL

    def __init__(self, url: str | None = None) -> None:
        super().__init__("Invalid URL provided.")
        self.url = url


class RequestFailedError(FetchError):
    """Transport-level failure (DNS, connection, timeout, TLS)."""

    kind = ErrorKind.REQUEST_FAILED

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Network request failed: {cause}")
        self.cause = cause


class InvalidResponseError(FetchError):
    """The peer answered with something that is not a valid HTTP response."""

    kind = ErrorKind.INVALID_RESPONSE

    def __init__(self) -> None:
        super().__init__("Invalid response received from the server.")


class DecodingError(FetchError):
    """A 2xx body did not match the expected schema."""

    kind = ErrorKind.DECODING_ERROR

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Failed to decode response: {cause}")
        self.cause = cause


class ServerError(FetchError):
    """Non-2xx response, with the server's payload or a synthesized fallback."""

    kind = ErrorKind.SERVER_ERROR

    def __init__(self, code: int, message: str) -> None:
        super().__init__(f"Server Error {code}: {message}")
        self.code = code
        self.message = message

    @classmethod
    def from_status(cls, status_code: int) -> "ServerError":
        """Fallback used when the error body is not a `{code, message}` payload."""

        return cls(status_code, f"Server returned status code {status_code}")


class NoResponseError(FetchError):
    """A single-emission channel completed without delivering anything."""

    kind = ErrorKind.NO_RESPONSE

    def __init__(self) -> None:
        super().__init__("No response received from the server.")
