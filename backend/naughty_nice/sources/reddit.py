"""
File: naughty_nice/sources/reddit.py
Reddit recent-comments fetcher. Uses an app-only OAuth token when one can be
obtained and falls back to an anonymous request otherwise.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import httpx

from naughty_nice.config import APP_USER_AGENT, REDDIT_COMMENT_LIMIT, settings
from naughty_nice.models import FetchResult, RawItem
from naughty_nice.sources.auth import TokenCache

logger = logging.getLogger(__name__)

REDDIT_AUTH_URL = "https://www.reddit.com/api/v1/access_token"
REDDIT_COMMENTS_URL = "https://www.reddit.com/user/{username}/comments.json"


def reddit_token_cache() -> TokenCache:
    return TokenCache(
        "Reddit",
        REDDIT_AUTH_URL,
        settings.REDDIT_CLIENT_ID,
        settings.REDDIT_CLIENT_SECRET,
        headers={"User-Agent": APP_USER_AGENT},
    )


def comment_karma(value: object) -> int:
    """Comment score as an int; anything unparseable counts as 0."""
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


class RedditFetcher:
    def __init__(self, client: httpx.AsyncClient, token_cache: TokenCache, limit: int = REDDIT_COMMENT_LIMIT) -> None:
        self.client = client
        self.token_cache = token_cache
        self.limit = limit

    async def fetch(self, username: str, now: Optional[float] = None) -> FetchResult:
        token = await self.token_cache.get_or_refresh(self.client, now)
        headers = {"User-Agent": APP_USER_AGENT}
        if token:
            headers["Authorization"] = f"Bearer {token}"

        url = REDDIT_COMMENTS_URL.format(username=username)
        try:
            r = await self.client.get(url, params={"limit": self.limit}, headers=headers)
            if not r.is_success:
                # private, suspended and unknown users all land here
                logger.info("Reddit user %s not found or private (HTTP %s)", username, r.status_code)
                return FetchResult.not_found()
            data = r.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Reddit fetch failed: %s", e)
            return FetchResult.not_found()

        if not isinstance(data, dict):
            logger.warning("Reddit returned an unexpected payload for u/%s", username)
            return FetchResult.not_found()

        listing = data.get("data")
        children = listing.get("children") if isinstance(listing, dict) else None
        if not isinstance(children, list):
            children = []

        items: List[RawItem] = []
        for child in children:
            c = child.get("data") if isinstance(child, dict) else None
            if not isinstance(c, dict):
                continue
            permalink = c.get("permalink") or ""
            items.append(
                RawItem(
                    text=str(c.get("body") or ""),
                    source="reddit",
                    link=f"https://www.reddit.com{permalink}" if permalink else "",
                    raw={
                        "score": comment_karma(c.get("score")),
                        "subreddit": c.get("subreddit", ""),
                    },
                )
            )

        logger.info("Reddit: found %d comments for u/%s", len(items), username)
        return FetchResult(items=items, found=True, origin="reddit-api")
