"""Single-emission channel + first_value bridge.

Invariants:
    - first_value returns the first value and ignores a later completion
    - failures propagate verbatim
    - completion without a value -> NoResponseError
    - the bridge unsubscribes right after the first value or failure
    - callbacks run on the channel's loop, even when produced from another thread
"""

import asyncio
import threading

import pytest

from core.domain.errors import NoResponseError, ServerError
from core.domain.result import FetchResult
from core.services.bridge import first_value
from core.services.channel import SingleEmissionChannel


@pytest.mark.asyncio
async def test_first_value_returns_value_and_unsubscribes():
    channel = SingleEmissionChannel()
    channel.emit("octocat")
    channel.finish()

    assert await first_value(channel) == "octocat"
    assert channel.subscriber_count == 0


@pytest.mark.asyncio
async def test_first_value_subscribed_before_emission():
    channel = SingleEmissionChannel()
    waiter = asyncio.ensure_future(first_value(channel))
    await asyncio.sleep(0)
    assert channel.subscriber_count == 1

    channel.emit(42)
    channel.finish()

    assert await waiter == 42
    assert channel.subscriber_count == 0


@pytest.mark.asyncio
async def test_failure_propagates_verbatim():
    error = ServerError(404, "User not found")
    channel = SingleEmissionChannel()
    channel.fail(error)

    with pytest.raises(ServerError) as excinfo:
        await first_value(channel)

    assert excinfo.value is error
    assert channel.subscriber_count == 0


@pytest.mark.asyncio
async def test_completion_without_value_is_no_response():
    channel = SingleEmissionChannel()
    channel.finish()

    with pytest.raises(NoResponseError):
        await first_value(channel)


@pytest.mark.asyncio
async def test_channel_rejects_second_emission():
    channel = SingleEmissionChannel()
    channel.emit(1)

    with pytest.raises(RuntimeError):
        channel.emit(2)
    with pytest.raises(RuntimeError):
        channel.fail(ValueError("after value"))

    channel.finish()
    channel.finish()
    with pytest.raises(RuntimeError):
        channel.fail(ValueError("late"))
    assert channel.closed


@pytest.mark.asyncio
async def test_cancelled_subscription_receives_nothing():
    received = []
    channel = SingleEmissionChannel()
    subscription = channel.subscribe(
        on_value=received.append,
        on_error=received.append,
        on_finish=lambda: received.append("finished"),
    )
    subscription.cancel()
    subscription.cancel()

    channel.emit("x")
    channel.finish()
    await asyncio.sleep(0)

    assert received == []


@pytest.mark.asyncio
async def test_subscriber_sees_value_then_finish_in_order():
    received = []
    channel = SingleEmissionChannel()
    channel.subscribe(
        on_value=received.append,
        on_error=received.append,
        on_finish=lambda: received.append("finished"),
    )

    channel.emit("x")
    channel.finish()
    await asyncio.sleep(0)
    await asyncio.sleep(0)

    assert received == ["x", "finished"]


@pytest.mark.asyncio
async def test_emission_from_other_thread_is_delivered_on_channel_loop():
    loop = asyncio.get_running_loop()
    channel = SingleEmissionChannel()
    delivered_on = []

    channel.subscribe(
        on_value=lambda value: delivered_on.append(asyncio.get_running_loop()),
        on_error=lambda error: None,
        on_finish=lambda: None,
    )

    def produce():
        channel.emit("from-thread")
        channel.finish()

    worker = threading.Thread(target=produce)
    worker.start()
    worker.join()

    assert await first_value(channel) == "from-thread"
    assert delivered_on == [loop]


@pytest.mark.asyncio
async def test_from_awaitable_success_emits_once_then_finishes():
    async def produce():
        return FetchResult.success("value")

    received = []
    channel = SingleEmissionChannel.from_awaitable(produce())
    channel.subscribe(
        on_value=received.append,
        on_error=received.append,
        on_finish=lambda: received.append("finished"),
    )

    assert await first_value(channel) == "value"
    await asyncio.sleep(0)
    assert received == ["value", "finished"]


@pytest.mark.asyncio
async def test_from_awaitable_failure_result_is_emitted_as_error():
    error = NoResponseError()

    async def produce():
        return FetchResult.failure(error)

    with pytest.raises(NoResponseError) as excinfo:
        await first_value(SingleEmissionChannel.from_awaitable(produce()))
    assert excinfo.value is error


@pytest.mark.asyncio
async def test_from_awaitable_unexpected_exception_is_emitted_as_error():
    async def produce():
        raise KeyError("boom")

    with pytest.raises(KeyError):
        await first_value(SingleEmissionChannel.from_awaitable(produce()))


@pytest.mark.asyncio
async def test_from_awaitable_cancelled_task_completes_without_value():
    started = asyncio.Event()

    async def produce():
        started.set()
        await asyncio.sleep(3600)

    channel = SingleEmissionChannel.from_awaitable(produce())
    await started.wait()
    channel._task.cancel()

    with pytest.raises(NoResponseError):
        await first_value(channel)


@pytest.mark.asyncio
async def test_bridge_cancelled_while_waiting_unsubscribes():
    channel = SingleEmissionChannel()
    waiter = asyncio.ensure_future(first_value(channel))
    await asyncio.sleep(0)

    waiter.cancel()
    with pytest.raises(asyncio.CancelledError):
        await waiter

    assert channel.subscriber_count == 0
