"""GitHub repository lookup for developer profiles."""

from collections.abc import AsyncGenerator
from typing import Any

import httpx
import structlog

from devconnector.config import settings
from devconnector.exceptions import UpstreamNotFoundError

logger = structlog.get_logger(__name__)

REPOS_PER_PAGE = 5
REPOS_SORT = "created:asc"
USER_AGENT = "devconnector"


class GitHubClient:
    """
    Thin wrapper over the GitHub REST API.

    The underlying ``httpx.AsyncClient`` is injected so tests can route
    requests to an ``httpx.MockTransport``.
    """

    def __init__(
        self,
        http: httpx.AsyncClient,
        client_id: str = "",
        client_secret: str = "",
    ) -> None:
        self.http = http
        self.client_id = client_id
        self.client_secret = client_secret

    async def get_user_repos(self, username: str) -> Any:
        """
        Return the first five of a user's public repositories, oldest first.

        The upstream JSON body is passed through untouched.

        Raises:
            UpstreamNotFoundError: if GitHub answers anything but 200
            httpx.HTTPError: on transport failure
        """
        params = {"per_page": REPOS_PER_PAGE, "sort": REPOS_SORT}
        auth = (self.client_id, self.client_secret) if self.client_id else None

        response = await self.http.get(
            f"/users/{username}/repos",
            params=params,
            auth=auth,
            headers={"user-agent": USER_AGENT},
        )

        if response.status_code != 200:
            logger.info(
                "github_lookup_failed",
                username=username,
                upstream_status=response.status_code,
            )
            raise UpstreamNotFoundError("No Github profile found")

        return response.json()


async def get_github_client() -> AsyncGenerator[GitHubClient, None]:
    """Dependency that provides a GitHub client for the duration of a request."""
    async with httpx.AsyncClient(
        base_url=settings.github_api_url,
        timeout=settings.github_timeout,
    ) as http:
        yield GitHubClient(
            http,
            client_id=settings.github_client_id,
            client_secret=settings.github_client_secret,
        )
