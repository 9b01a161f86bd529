"""Tagged result of a fetch: a value or a taxonomy error, never both."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from core.domain.errors import FetchError

T = TypeVar("T")


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """Outcome of exactly one fetch invocation."""

    value: T | None = None
    error: FetchError | None = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("FetchResult needs exactly one of value or error")

    @classmethod
    def success(cls, value: T) -> "FetchResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: FetchError) -> "FetchResult[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value or raise the error."""

        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
