"""Fetch Service for GitHub users."""

from __future__ import annotations

from core.config import AppSettings
from core.domain.models import GitHubUser
from core.domain.requests import RequestDescriptor, build_get_user_request
from core.domain.result import FetchResult
from core.interfaces.fetcher import UserFetcher
from core.interfaces.transport import TransportClient
from core.services.channel import SingleEmissionChannel
from core.services.fetch_service import FetchService


class UserInteractor(FetchService, UserFetcher):
    """`GET /users/<username>` decoded into `GitHubUser`."""

    def __init__(self, transport: TransportClient, settings: AppSettings | None = None) -> None:
        super().__init__(transport)
        self._settings = settings or AppSettings()

    def build_request(self, username: str) -> RequestDescriptor:
        return build_get_user_request(username, base_url=self._settings.api_base_url)

    async def get_user(self, username: str) -> FetchResult[GitHubUser]:
        return await self.fetch(self.build_request(username))

    def user_channel(self, username: str) -> SingleEmissionChannel[GitHubUser]:
        return self.publish(self.build_request(username))
