"""Presenter: holds the view state of one user lookup.

The CLI reads `user`/`error_message` after `load_user`; taxonomy errors never
escape, they become the message shown to the user.
"""

from __future__ import annotations

import logging

from core.domain.errors import FetchError
from core.domain.models import GitHubUser
from core.interfaces.fetcher import UserFetcher
from core.services.bridge import first_value

logger = logging.getLogger(__name__)


class UserPresenter:
    def __init__(self, fetcher: UserFetcher) -> None:
        self.fetcher = fetcher
        self.user: GitHubUser | None = None
        self.error_message: str | None = None
        self.is_loading = False

    async def load_user(self, username: str) -> None:
        self.is_loading = True
        self.error_message = None
        self.user = None

        try:
            self.user = await first_value(self.fetcher.user_channel(username))
        except FetchError as exc:
            logger.info("User load failed: %s", exc.description)
            self.error_message = exc.description
        except Exception as exc:
            logger.exception("User load failed unexpectedly")
            self.error_message = str(exc) or "An unknown error occurred."
        finally:
            self.is_loading = False
