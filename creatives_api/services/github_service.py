"""Pass-through lookup of a user's public GitHub repositories."""

from __future__ import annotations

import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx

from creatives_api.core.config import get_settings
from creatives_api.core.errors import UpstreamError

logger = logging.getLogger(__name__)

NO_GITHUB_PROFILE = "No Github profile found"


class GithubService:
    def __init__(self, client: Optional[httpx.Client] = None) -> None:
        self.settings = get_settings()
        self._client = client

    def _get(self, url: str, **kwargs) -> httpx.Response:
        if self._client is not None:
            return self._client.get(url, **kwargs)
        with httpx.Client(timeout=self.settings.github_timeout_seconds) as client:
            return client.get(url, **kwargs)

    def list_repos(self, username: str) -> Any:
        """Six most recently created repos, oldest first, as GitHub returns them."""
        name = (username or "").strip()
        if not name:
            raise UpstreamError(NO_GITHUB_PROFILE)
        url = f"{self.settings.github_api_url}/users/{quote(name, safe='')}/repos"
        kwargs: dict[str, Any] = {
            "params": {"per_page": 6, "sort": "created", "direction": "asc"},
            "headers": {"User-Agent": "creatives-api", "Accept": "application/vnd.github+json"},
        }
        if self.settings.github_client_id and self.settings.github_secret:
            kwargs["auth"] = (self.settings.github_client_id, self.settings.github_secret)
        try:
            response = self._get(url, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("GitHub lookup for %s failed: %s", name, exc)
            raise UpstreamError(NO_GITHUB_PROFILE) from exc
        if response.status_code != 200:
            logger.info("GitHub lookup for %s returned %s", name, response.status_code)
            raise UpstreamError(NO_GITHUB_PROFILE)
        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamError(NO_GITHUB_PROFILE) from exc
