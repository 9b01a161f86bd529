"""Single-emission asynchronous channel.

A channel carries at most one value followed by completion, or one error. It
is bound to the event loop that created it and every subscriber callback runs
on that loop, whichever thread or task produced the event. Events are kept, so
a late subscriber still sees them.
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Generic, TypeVar

from core.domain.result import FetchResult

T = TypeVar("T")

_VALUE = "value"
_ERROR = "error"
_FINISH = "finish"


class Subscription:
    """Handle returned by `SingleEmissionChannel.subscribe`."""

    def __init__(
        self,
        channel: "SingleEmissionChannel[Any]",
        on_value: Callable[[Any], None],
        on_error: Callable[[BaseException], None],
        on_finish: Callable[[], None],
    ) -> None:
        self._channel = channel
        self.on_value = on_value
        self.on_error = on_error
        self.on_finish = on_finish
        self.delivered = 0
        self.active = True

    def cancel(self) -> None:
        """Stop receiving events. Idempotent."""

        if self.active:
            self.active = False
            self._channel._unsubscribe(self)


class SingleEmissionChannel(Generic[T]):
    """Conduit delivering one value then completion, or one error."""

    def __init__(self, *, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop or asyncio.get_running_loop()
        self._events: list[tuple[str, Any]] = []
        self._subscriptions: list[Subscription] = []
        self._task: asyncio.Future[Any] | None = None

    @classmethod
    def from_awaitable(cls, awaitable: Awaitable[FetchResult[T]]) -> "SingleEmissionChannel[T]":
        """Run `awaitable` as a task on the current loop and emit its result.

        A value is followed by completion; an error (taxonomy or unexpected) is
        emitted as a failure; a cancelled task completes with no emission.
        """

        channel: SingleEmissionChannel[T] = cls()
        channel._task = asyncio.ensure_future(awaitable)
        channel._task.add_done_callback(channel._settle)
        return channel

    @property
    def closed(self) -> bool:
        return any(kind in (_ERROR, _FINISH) for kind, _ in self._events)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def emit(self, value: T) -> None:
        if self.closed or any(kind == _VALUE for kind, _ in self._events):
            raise RuntimeError("channel already delivered its emission")
        self._push(_VALUE, value)

    def fail(self, error: BaseException) -> None:
        if self.closed or any(kind == _VALUE for kind, _ in self._events):
            raise RuntimeError("channel already delivered its emission")
        self._push(_ERROR, error)

    def finish(self) -> None:
        if not self.closed:
            self._push(_FINISH, None)

    def subscribe(
        self,
        *,
        on_value: Callable[[T], None],
        on_error: Callable[[BaseException], None],
        on_finish: Callable[[], None],
    ) -> Subscription:
        subscription = Subscription(self, on_value, on_error, on_finish)
        self._subscriptions.append(subscription)
        if self._events:
            self._schedule(subscription)
        return subscription

    def _settle(self, task: asyncio.Future[FetchResult[T]]) -> None:
        if task.cancelled():
            self.finish()
            return
        exc = task.exception()
        if exc is not None:
            self.fail(exc)
            return
        result = task.result()
        if result.error is not None:
            self.fail(result.error)
        else:
            self.emit(result.value)  # type: ignore[arg-type]
            self.finish()

    def _push(self, kind: str, payload: Any) -> None:
        self._events.append((kind, payload))
        for subscription in list(self._subscriptions):
            self._schedule(subscription)

    def _schedule(self, subscription: Subscription) -> None:
        self._loop.call_soon_threadsafe(self._deliver, subscription)

    def _deliver(self, subscription: Subscription) -> None:
        while subscription.active and subscription.delivered < len(self._events):
            kind, payload = self._events[subscription.delivered]
            subscription.delivered += 1
            if kind == _VALUE:
                subscription.on_value(payload)
            elif kind == _ERROR:
                subscription.on_error(payload)
            else:
                subscription.on_finish()

    def _unsubscribe(self, subscription: Subscription) -> None:
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)
