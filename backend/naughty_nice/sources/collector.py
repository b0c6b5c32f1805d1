"""
Multi-source collection coordinator: fetch, analyze and aggregate per handle.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Dict, Optional, Tuple

import httpx

from naughty_nice.config import SCORE_WEIGHTS
from naughty_nice.core.scoring import aggregate
from naughty_nice.core.sentiment import (
    analyze_github_activity,
    analyze_news_snippets,
    analyze_reddit_comments,
    analyze_tweets,
)
from naughty_nice.models import FetchResult
from naughty_nice.schemas import MultiSourceResponse, SingleSourceResponse, SourceResult, UserProfile
from naughty_nice.sources.auth import TokenCache
from naughty_nice.sources.common import new_client
from naughty_nice.sources.demo import demo_profile, generate_demo_posts
from naughty_nice.sources.github import GitHubFetcher
from naughty_nice.sources.news import NewsFetcher
from naughty_nice.sources.reddit import RedditFetcher, reddit_token_cache
from naughty_nice.sources.twitter import ORIGIN_API, ORIGIN_CACHE, TwitterFetcher, twitter_token_cache
from naughty_nice.utils import display_name

logger = logging.getLogger(__name__)

# Process-wide credential caches, shared by every request
REDDIT_TOKENS: TokenCache = reddit_token_cache()
TWITTER_TOKENS: TokenCache = twitter_token_cache()

SourceOutcome = Tuple[SourceResult, FetchResult]


async def run_twitter(fetcher: TwitterFetcher, identifier: str) -> SourceOutcome:
    fetched = await fetcher.fetch(identifier)
    if not fetched.items:
        return SourceResult.missing(), fetched
    return analyze_tweets(fetched.items), fetched


async def run_reddit(fetcher: RedditFetcher, identifier: str) -> SourceOutcome:
    fetched = await fetcher.fetch(identifier)
    if not (fetched.found and fetched.items):
        return SourceResult.missing(), fetched
    return analyze_reddit_comments(fetched.items), fetched


async def run_news(fetcher: NewsFetcher, identifier: str) -> SourceOutcome:
    fetched = await fetcher.fetch(identifier)
    if not (fetched.found and fetched.items):
        return SourceResult.missing(), fetched
    return analyze_news_snippets(fetched.items), fetched


async def run_github(fetcher: GitHubFetcher, identifier: str) -> SourceOutcome:
    # No account still scores a neutral, found result
    fetched = await fetcher.fetch(identifier)
    return analyze_github_activity(fetched.profile, fetched.items), fetched


async def guarded(name: str, step: Callable[[], Awaitable[SourceOutcome]]) -> SourceOutcome:
    """Run one source pipeline; an unexpected error only knocks out that source."""
    try:
        return await step()
    except Exception:
        logger.exception("%s pipeline failed", name)
        return SourceResult.missing(), FetchResult.not_found()


async def collect_sources(
    identifier: str,
    client: httpx.AsyncClient,
    reddit_tokens: Optional[TokenCache] = None,
    twitter_tokens: Optional[TokenCache] = None,
) -> Dict[str, SourceOutcome]:
    """
    Fetch and analyze every source for one handle, concurrently.

    Args:
        identifier: Normalized handle, used unchanged for every source
        client: Shared HTTP client
        reddit_tokens: Forum token cache (process-wide cache when None)
        twitter_tokens: Search API token cache (process-wide cache when None)

    Returns:
        Source name -> (analysis, raw fetch result)
    """
    twitter = TwitterFetcher(client, twitter_tokens or TWITTER_TOKENS)
    reddit = RedditFetcher(client, reddit_tokens or REDDIT_TOKENS)
    news = NewsFetcher(client)
    github = GitHubFetcher(client)

    names = ("twitter", "reddit", "news", "github")
    outcomes = await asyncio.gather(
        guarded("twitter", lambda: run_twitter(twitter, identifier)),
        guarded("reddit", lambda: run_reddit(reddit, identifier)),
        guarded("news", lambda: run_news(news, identifier)),
        guarded("github", lambda: run_github(github, identifier)),
    )
    results = dict(zip(names, outcomes))

    for name, (result, _) in results.items():
        if result.found:
            logger.info("%s: %s/100 (%s)", name, result.score, result.verdict)
        else:
            logger.info("%s: no data for %s", name, identifier)

    return results


def mirror_profile(identifier: str, post_count: int, name: Optional[str] = None) -> UserProfile:
    return UserProfile(
        username=identifier,
        name=name or identifier,
        profile_image=f"https://unavatar.io/twitter/{identifier}",
        description=f"@{identifier} on Twitter/X",
        tweets=post_count,
    )


def build_primary_profile(identifier: str, outcomes: Dict[str, SourceOutcome]) -> UserProfile:
    """
    Pick the profile to display: twitter, else GitHub, else a placeholder.

    Display only; has no effect on scoring.
    """
    twitter_result, twitter_fetch = outcomes["twitter"]
    if twitter_result.found:
        if twitter_fetch.profile:
            return UserProfile(**{"username": identifier, **twitter_fetch.profile})
        return mirror_profile(identifier, len(twitter_fetch.items))

    github_profile = outcomes["github"][1].profile
    if github_profile:
        return UserProfile(
            username=identifier,
            name=github_profile.get("name") or identifier,
            profile_image=github_profile.get("avatar_url") or f"https://unavatar.io/{identifier}",
            description=github_profile.get("bio") or f"Multi-platform analysis for {identifier}",
            followers=github_profile.get("followers") or "—",
            following=github_profile.get("following") or "—",
        )

    return UserProfile(
        username=identifier,
        name=identifier,
        profile_image=f"https://unavatar.io/{identifier}",
        description=f"Multi-platform analysis for {identifier}",
    )


async def analyze_all(identifier: str, client: Optional[httpx.AsyncClient] = None) -> MultiSourceResponse:
    """
    Multi-source analysis for a normalized handle.

    Args:
        identifier: Normalized handle
        client: HTTP client to use; a fresh one is opened and closed when None

    Returns:
        MultiSourceResponse with the weighted verdict and per-source breakdown
    """
    logger.info("Multi-source analysis: @%s", identifier)

    if client is None:
        async with new_client() as own_client:
            outcomes = await collect_sources(identifier, own_client)
    else:
        outcomes = await collect_sources(identifier, client)

    result = aggregate({name: analysis for name, (analysis, _) in outcomes.items()})
    logger.info(
        "Final score for @%s: %d/100 - %s (%d/%d sources)",
        identifier, result.final_score, result.verdict, result.sources_found, len(outcomes),
    )

    return MultiSourceResponse(
        user=build_primary_profile(identifier, outcomes),
        final_score=result.final_score,
        verdict=result.verdict,
        breakdown=result.breakdown,
        sources_found=result.sources_found,
        weights=dict(SCORE_WEIGHTS),
    )


def describe_origin(origin: Optional[str]) -> str:
    if origin in (ORIGIN_API, ORIGIN_CACHE):
        return origin
    return f"nitter ({origin})"


async def fetch_posts(identifier: str, client: httpx.AsyncClient) -> FetchResult:
    """Run only the microblog fallback chain (used by the legacy endpoint and chat)."""
    return await TwitterFetcher(client, TWITTER_TOKENS).fetch(identifier)


async def fetch_posts_with_live_profile(identifier: str, client: httpx.AsyncClient) -> FetchResult:
    """Microblog chain; static-cache hits get live profile stats when the API allows."""
    fetcher = TwitterFetcher(client, TWITTER_TOKENS)
    fetched = await fetcher.fetch(identifier)
    if fetched.origin == ORIGIN_CACHE and fetched.profile:
        fetched.profile = await fetcher.refresh_cached_profile(identifier, fetched.profile)
    return fetched


async def analyze_single(
    identifier: str,
    demo: bool = False,
    client: Optional[httpx.AsyncClient] = None,
) -> SingleSourceResponse:
    """
    Legacy single-source analysis over microblog posts only.

    Falls back to deterministic demo data when ``demo`` is set or nothing
    could be fetched.
    """
    logger.info("Analyzing user: @%s", identifier)

    fetched = FetchResult.not_found()
    if not demo:
        if client is None:
            async with new_client() as own_client:
                fetched = await fetch_posts_with_live_profile(identifier, own_client)
        else:
            fetched = await fetch_posts_with_live_profile(identifier, client)

    if fetched.items:
        posts = fetched.items
        if fetched.profile:
            user = UserProfile(**{"username": identifier, **fetched.profile})
        else:
            user = mirror_profile(identifier, len(posts), name=display_name(identifier))
        is_demo = False
        data_source = describe_origin(fetched.origin)
    else:
        logger.info("Using demo mode for: %s", identifier)
        posts = generate_demo_posts(identifier)
        user = UserProfile(**demo_profile(identifier))
        is_demo = True
        data_source = "demo"

    analysis = analyze_tweets(posts)
    logger.info("Analysis complete: %s (score: %s), data source: %s", analysis.verdict, analysis.score, data_source)

    return SingleSourceResponse(user=user, analysis=analysis, is_demo=is_demo, data_source=data_source)
