"""Presenter tests: view state after success and after each kind of failure."""

import pytest

from cli.presenter import UserPresenter
from core.domain.errors import RequestFailedError
from core.services.user_interactor import UserInteractor
from fake_transport import FakeTransport

USER_WIRE = {"login": "testuser", "avatar_url": "http://x/a.png", "bio": "A test user"}


@pytest.mark.asyncio
async def test_load_user_success(settings):
    presenter = UserPresenter(UserInteractor(FakeTransport.json(200, USER_WIRE), settings))

    await presenter.load_user("testuser")

    assert presenter.user.login == "testuser"
    assert presenter.error_message is None
    assert presenter.is_loading is False


@pytest.mark.asyncio
async def test_load_user_failure_sets_error_description(settings):
    presenter = UserPresenter(
        UserInteractor(FakeTransport.json(404, {"code": 404, "message": "User not found"}), settings)
    )

    await presenter.load_user("missing")

    assert presenter.user is None
    assert presenter.error_message == "Server Error 404: User not found"
    assert presenter.is_loading is False


@pytest.mark.asyncio
async def test_load_user_resets_previous_state(settings):
    transport = FakeTransport.json(200, USER_WIRE)
    presenter = UserPresenter(UserInteractor(transport, settings))
    await presenter.load_user("testuser")

    transport.error = RequestFailedError(OSError("offline"))
    await presenter.load_user("testuser")

    assert presenter.user is None
    assert presenter.error_message == "Network request failed: offline"


@pytest.mark.asyncio
async def test_load_user_invalid_target(settings):
    presenter = UserPresenter(UserInteractor(FakeTransport(), settings))

    await presenter.load_user(" ")

    assert presenter.error_message == "Invalid URL provided."


@pytest.mark.asyncio
async def test_load_user_unexpected_error_becomes_message(settings):
    presenter = UserPresenter(UserInteractor(FakeTransport(error=KeyError("boom")), settings))

    await presenter.load_user("testuser")

    assert presenter.user is None
    assert presenter.error_message == "'boom'"
    assert presenter.is_loading is False


@pytest.mark.asyncio
async def test_load_user_unexpected_error_without_text(settings):
    presenter = UserPresenter(UserInteractor(FakeTransport(error=RuntimeError()), settings))

    await presenter.load_user("testuser")

    assert presenter.error_message == "An unknown error occurred."
