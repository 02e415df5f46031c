"""
Client for the GitHub repository listing.

Passes the upstream response through unchanged; the only logic here is
request decoration (User-Agent, service credentials) and status mapping.
"""
import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from devnet.core.config import settings

logger = logging.getLogger(__name__)


class GithubUserNotFound(Exception):
    """Upstream did not answer with a success status for this username."""


class GithubReposService:
    """
    Lists a GitHub user's most recently created public repositories.
    """

    PER_PAGE = 5
    SORT = "created:asc"

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: Optional[str] = None,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        user_agent: Optional[str] = None,
    ):
        self.client = client
        self.base_url = (base_url or settings.GITHUB_API_URL).rstrip("/")
        self.client_id = client_id if client_id is not None else settings.GITHUB_CLIENT_ID
        self.client_secret = client_secret if client_secret is not None else settings.GITHUB_CLIENT_SECRET
        self.user_agent = user_agent or settings.GITHUB_USER_AGENT

    def _build_headers(self) -> Dict[str, str]:
        return {
            "User-Agent": self.user_agent,
            "Accept": "application/vnd.github+json",
        }

    def _build_auth(self) -> Optional[httpx.BasicAuth]:
        if self.client_id and self.client_secret:
            return httpx.BasicAuth(self.client_id, self.client_secret)
        return None

    async def list_repos(self, username: str) -> List[Dict[str, Any]]:
        """
        Fetch the repositories of ``username``.

        Raises:
            GithubUserNotFound: If upstream answers with a non-2xx status
            httpx.HTTPError: On transport failures (connection, timeout)
        """
        # The username must stay a single path segment
        segment = quote(username, safe="")
        url = f"{self.base_url}/users/{segment}/repos"
        params = {"per_page": self.PER_PAGE, "sort": self.SORT}

        logger.info(f"[GITHUB] Fetching repos for {username}")
        kwargs: Dict[str, Any] = {"params": params, "headers": self._build_headers()}
        auth = self._build_auth()
        if auth is not None:
            kwargs["auth"] = auth
        response = await self.client.get(url, **kwargs)

        if not response.is_success:
            logger.info(f"[GITHUB] Upstream answered {response.status_code} for {username}")
            raise GithubUserNotFound(username)

        return response.json()
