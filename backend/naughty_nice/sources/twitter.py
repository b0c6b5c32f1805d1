"""
Microblog fetcher: Nitter mirror RSS first, then the search API, then the static cache.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

import feedparser
import httpx

from naughty_nice.config import (
    APP_USER_AGENT,
    MIRROR_TIMEOUT_SECONDS,
    NITTER_INSTANCES,
    TWITTER_SEARCH_MAX_RESULTS,
    settings,
)
from naughty_nice.models import FetchResult, RawItem
from naughty_nice.sources.auth import TokenCache
from naughty_nice.sources.cached import lookup_cached
from naughty_nice.sources.common import (
    SourceUnavailable,
    decode_entities,
    fetch_text,
    normalize_date,
    strip_tags,
)
from naughty_nice.utils import normalize_text

logger = logging.getLogger(__name__)

TWITTER_TOKEN_URL = "https://api.twitter.com/oauth2/token"
TWITTER_SEARCH_URL = "https://api.twitter.com/2/tweets/search/recent"
TWITTER_USER_URL = "https://api.twitter.com/2/users/by/username/{username}"

SOURCE = "twitter"
ORIGIN_API = "twitter-api"
ORIGIN_CACHE = "cached-real-data"


def twitter_token_cache() -> TokenCache:
    """App-only search token; these carry no lifetime and are kept until restart."""
    return TokenCache(
        "Twitter",
        TWITTER_TOKEN_URL,
        settings.TWITTER_API_KEY,
        settings.TWITTER_API_SECRET_KEY,
        headers={"User-Agent": APP_USER_AGENT},
    )


def parse_mirror_feed(xml: str, mirror: str) -> List[RawItem]:
    """
    Extract posts from a mirror RSS document.

    Args:
        xml: Raw RSS body
        mirror: Mirror host the document came from

    Returns:
        Posts with non-empty text, in feed order
    """
    if "<item>" not in xml:
        return []

    feed = feedparser.parse(xml)
    items: List[RawItem] = []

    for entry in feed.entries:
        # Description carries the full post; title is a truncated copy
        body = entry.get("summary") or entry.get("title") or ""
        text = normalize_text(decode_entities(strip_tags(body)))
        if not text:
            continue

        items.append(
            RawItem(
                text=text,
                source=SOURCE,
                link=(entry.get("link") or "").strip(),
                date=normalize_date(entry.get("published")),
                raw={"mirror": mirror},
            )
        )

    return items


def _field(value: Any, default: Any) -> Any:
    """Keep an upstream profile value only if it is a non-empty str or int."""
    if isinstance(value, bool) or not isinstance(value, (str, int)) or value in ("", 0):
        return default
    return value


def author_profile(author: Dict[str, Any], username: str, tweet_count: int) -> Dict[str, Any]:
    """Map a search API ``includes.users`` entry to display profile fields."""
    metrics = author.get("public_metrics")
    metrics = metrics if isinstance(metrics, dict) else {}
    image = author.get("profile_image_url")
    image = image if isinstance(image, str) and image else f"https://unavatar.io/twitter/{username}"
    return {
        "username": str(_field(author.get("username"), username)),
        "name": str(_field(author.get("name"), username)),
        "profile_image": image.replace("_normal", "_400x400"),
        "description": str(_field(author.get("description"), "")),
        "followers": _field(metrics.get("followers_count"), 0),
        "following": _field(metrics.get("following_count"), 0),
        "tweets": _field(metrics.get("tweet_count"), tweet_count),
    }


class TwitterFetcher:
    """Fetches recent posts for a handle through a fixed fallback chain."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        token_cache: Optional[TokenCache] = None,
        instances: Optional[Sequence[str]] = None,
    ) -> None:
        self.client = client
        self.token_cache = token_cache or twitter_token_cache()
        self.instances = list(instances if instances is not None else NITTER_INSTANCES)

    async def fetch(self, username: str) -> FetchResult:
        """
        Run mirror scrape, search API and static cache in that order.

        Args:
            username: Normalized handle

        Returns:
            First successful result, or not-found
        """
        result = await self.fetch_from_mirrors(username)
        if result.found:
            return result

        logger.info("Mirrors failed for @%s, trying search API", username)
        result = await self.fetch_from_search_api(username)
        if result.found:
            return result

        result = self.fetch_from_cache(username)
        if result.found:
            logger.info("Using cached posts for @%s", username)
            return result

        logger.info("Twitter: no data found for @%s", username)
        return FetchResult.not_found()

    async def fetch_from_mirrors(self, username: str) -> FetchResult:
        for instance in self.instances:
            url = f"https://{instance}/{username}/rss"
            logger.info("Trying Nitter instance: %s", url)
            try:
                xml = await fetch_text(self.client, url, timeout=MIRROR_TIMEOUT_SECONDS)
            except (httpx.HTTPError, SourceUnavailable) as e:
                logger.info("%s failed: %s", instance, str(e) or type(e).__name__)
                continue

            items = parse_mirror_feed(xml, instance)
            if items:
                logger.info("Got %d posts from %s", len(items), instance)
                return FetchResult(items=items, found=True, origin=instance)

            logger.info("%s returned no posts", instance)

        return FetchResult.not_found()

    async def fetch_from_search_api(self, username: str) -> FetchResult:
        token = await self.token_cache.get_or_refresh(self.client)
        if not token:
            return FetchResult.not_found()

        params = {
            "query": f"from:{username}",
            "max_results": TWITTER_SEARCH_MAX_RESULTS,
            "tweet.fields": "created_at,public_metrics,text,author_id",
            "expansions": "author_id",
            "user.fields": "profile_image_url,description,public_metrics,name,username",
        }
        headers = {"Authorization": f"Bearer {token}", "User-Agent": APP_USER_AGENT}

        payload = await self._get_json(TWITTER_SEARCH_URL, params=params, headers=headers)
        if payload is None:
            return FetchResult.not_found()

        tweets = payload.get("data")
        if not isinstance(tweets, list):
            return FetchResult.not_found()

        items = [
            RawItem(
                text=tweet["text"],
                source=SOURCE,
                link=f"https://twitter.com/{username}/status/{tweet.get('id', '')}",
                date=normalize_date(tweet.get("created_at")),
                raw={"public_metrics": tweet.get("public_metrics") or {}},
            )
            for tweet in tweets
            if isinstance(tweet, dict) and isinstance(tweet.get("text"), str) and tweet["text"]
        ]
        if not items:
            return FetchResult.not_found()

        includes = payload.get("includes")
        users = includes.get("users") if isinstance(includes, dict) else None
        author = users[0] if isinstance(users, list) and users and isinstance(users[0], dict) else {}
        logger.info("Got %d posts from Twitter API", len(items))
        return FetchResult(
            items=items,
            found=True,
            origin=ORIGIN_API,
            profile=author_profile(author, username, len(items)),
        )

    async def lookup_user(self, username: str) -> Optional[Dict[str, Any]]:
        """
        Live profile stats for a handle from the user lookup endpoint.

        Returns:
            The raw user object, or None when unavailable
        """
        token = await self.token_cache.get_or_refresh(self.client)
        if not token:
            return None

        payload = await self._get_json(
            TWITTER_USER_URL.format(username=username),
            params={"user.fields": "profile_image_url,description,public_metrics,name"},
            headers={"Authorization": f"Bearer {token}", "User-Agent": APP_USER_AGENT},
        )
        user = payload.get("data") if payload else None
        return user if isinstance(user, dict) else None

    async def refresh_cached_profile(self, username: str, cached: Dict[str, Any]) -> Dict[str, Any]:
        """Overlay live stats on a static-cache profile; cached values fill any gaps."""
        live = await self.lookup_user(username)
        if not live:
            return cached

        metrics = live.get("public_metrics")
        metrics = metrics if isinstance(metrics, dict) else {}
        image = live.get("profile_image_url")
        logger.info("Got live stats for cached account @%s", username)
        return {
            **cached,
            "username": str(_field(live.get("username"), username)),
            "name": str(_field(live.get("name"), cached.get("name") or username)),
            "profile_image": image.replace("_normal", "_400x400") if isinstance(image, str) and image else cached["profile_image"],
            "description": str(_field(live.get("description"), cached.get("description", ""))),
            "followers": _field(metrics.get("followers_count"), cached.get("followers", "—")),
            "following": _field(metrics.get("following_count"), cached.get("following", "—")),
            "tweets": _field(metrics.get("tweet_count"), cached.get("tweets", "—")),
        }

    async def _get_json(self, url: str, **kwargs: Any) -> Optional[Dict[str, Any]]:
        try:
            response = await self.client.get(url, **kwargs)
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Twitter API failed: %s", e)
            return None

        if not isinstance(payload, dict):
            logger.warning("Twitter API returned an unexpected payload from %s", url)
            return None
        return payload

    def fetch_from_cache(self, username: str) -> FetchResult:
        cached = lookup_cached(username)
        if not cached:
            return FetchResult.not_found()

        items = [RawItem(text=text, source=SOURCE) for text in cached["tweets"]]
        profile = {"username": username, **cached["user"]}
        return FetchResult(items=items, found=True, origin=ORIGIN_CACHE, profile=profile)
