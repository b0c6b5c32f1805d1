"""
GitHub public profile and recent events fetcher.
"""
from __future__ import annotations

import logging
from typing import Any, List

import httpx

from naughty_nice.config import GITHUB_EVENTS_PER_PAGE, GITHUB_HEADERS
from naughty_nice.models import FetchResult, RawItem

logger = logging.getLogger(__name__)


def repo_name(repo: Any) -> str:
    return str(repo.get("name") or "") if isinstance(repo, dict) else ""


class GitHubFetcher:
    """Fetches a user profile plus a bounded page of public events."""

    BASE_URL = "https://api.github.com"

    def __init__(self, client: httpx.AsyncClient, per_page: int = GITHUB_EVENTS_PER_PAGE) -> None:
        self.client = client
        self.per_page = per_page

    async def fetch(self, username: str) -> FetchResult:
        """
        Fetch profile and events for a user.

        A missing profile is not-found. Missing or failed events leave an
        empty event list next to a valid profile.

        Args:
            username: Normalized handle

        Returns:
            FetchResult with ``profile`` set and one item per event
        """
        try:
            response = await self.client.get(f"{self.BASE_URL}/users/{username}", headers=GITHUB_HEADERS)
            if not response.is_success:
                logger.info("GitHub user %s not found (HTTP %s)", username, response.status_code)
                return FetchResult.not_found()
            profile = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("GitHub fetch failed: %s", e)
            return FetchResult.not_found()

        if not isinstance(profile, dict):
            return FetchResult.not_found()

        events = await self.fetch_events(username)
        items = [
            RawItem(
                text=str(event.get("type") or ""),
                source="github",
                date=str(event.get("created_at") or ""),
                raw={"type": event.get("type"), "repo": repo_name(event.get("repo"))},
            )
            for event in events
            if isinstance(event, dict)
        ]

        logger.info("GitHub: found user %s with %s repos", username, profile.get("public_repos", 0))
        return FetchResult(items=items, found=True, origin="github-api", profile=profile)

    async def fetch_events(self, username: str) -> List[Any]:
        url = f"{self.BASE_URL}/users/{username}/events/public"
        try:
            response = await self.client.get(url, params={"per_page": self.per_page}, headers=GITHUB_HEADERS)
            if not response.is_success:
                return []
            events = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.info("GitHub events unavailable for %s: %s", username, e)
            return []
        return events if isinstance(events, list) else []
