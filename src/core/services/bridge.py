"""Bridge from a single-emission channel to a plain `await`."""

from __future__ import annotations

import asyncio
from typing import TypeVar

from core.domain.errors import NoResponseError
from core.services.channel import SingleEmissionChannel

T = TypeVar("T")


async def first_value(channel: SingleEmissionChannel[T]) -> T:
    """Await the first value of `channel`.

    - A failure is re-raised as is.
    - Completion without a value raises `NoResponseError`.
    - Completion after a value is ignored.
    - The subscription is cancelled on the first value or failure, and when
      the awaiting task is cancelled.
    """

    result: asyncio.Future[T] = asyncio.get_running_loop().create_future()

    def on_value(value: T) -> None:
        if not result.done():
            result.set_result(value)
        subscription.cancel()

    def on_error(error: BaseException) -> None:
        if not result.done():
            result.set_exception(error)
        subscription.cancel()

    def on_finish() -> None:
        if not result.done():
            result.set_exception(NoResponseError())
        subscription.cancel()

    subscription = channel.subscribe(on_value=on_value, on_error=on_error, on_finish=on_finish)
    try:
        return await result
    finally:
        subscription.cancel()
