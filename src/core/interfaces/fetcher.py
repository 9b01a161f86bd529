"""Contract consumers use to fetch users."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import GitHubUser
from core.domain.result import FetchResult
from core.services.channel import SingleEmissionChannel


@runtime_checkable
class UserFetcher(Protocol):
    """Fetch a user by name, as a tagged result or as a single-emission channel."""

    async def get_user(self, username: str) -> FetchResult[GitHubUser]:
        ...

    def user_channel(self, username: str) -> SingleEmissionChannel[GitHubUser]:
        ...
