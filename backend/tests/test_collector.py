from __future__ import annotations

import httpx
import pytest

from conftest import Recorder, rss
from naughty_nice.config import SCORE_WEIGHTS
from naughty_nice.sources import collector
from naughty_nice.sources.auth import TokenCache
from naughty_nice.utils import round_half_up

NEWS_PAGE = (
    '<a class="result__a" href="https://news.example.com/a">Someone honored at gala dinner</a>'
    '<a class="result__snippet">Someone was praised for charity work this week</a>'
)


def reddit_comments(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json={"data": {"children": [
        {"data": {"body": "I love this", "score": 15, "subreddit": "a"}},
        {"data": {"body": "you are stupid", "score": -3, "subreddit": "b"}},
    ]}})


def github_api(profile: dict):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/events/public"):
            return httpx.Response(200, json=[{"type": "PushEvent", "repo": {"name": "x/y"}}])
        return httpx.Response(200, json=profile)
    return handler


def all_sources_up() -> Recorder:
    return Recorder({
        "nitter.net": lambda r: httpx.Response(200, text=rss("I love this", "thanks, friend")),
        "www.reddit.com": reddit_comments,
        "html.duckduckgo.com": lambda r: httpx.Response(200, text=NEWS_PAGE),
        "api.github.com": github_api({"name": "Some One", "avatar_url": "https://a.example/1.png", "public_repos": 1}),
    })


@pytest.mark.asyncio
async def test_analyze_all_combines_every_source():
    async with all_sources_up().client() as client:
        response = await collector.analyze_all("someone", client=client)

    breakdown = response.breakdown
    assert set(breakdown) == {"twitter", "reddit", "news", "github"}
    assert response.sources_found == 4
    assert breakdown["reddit"].score == 47
    assert breakdown["reddit"].verdict == "NAUGHTY"
    assert breakdown["twitter"].score == 65
    assert breakdown["github"].score == 54
    assert breakdown["twitter"].weight_percent == 30

    weighted = sum(e.score * SCORE_WEIGHTS[n] for n, e in breakdown.items())
    assert response.final_score == round_half_up(weighted / sum(SCORE_WEIGHTS[n] for n in breakdown))
    assert response.weights == SCORE_WEIGHTS

    # mirror posts win the profile
    assert response.user.username == "someone"
    assert response.user.profile_image == "https://unavatar.io/twitter/someone"
    assert response.user.tweets == 2


@pytest.mark.asyncio
async def test_analyze_all_with_every_source_down_is_neutral():
    recorder = Recorder()
    async with recorder.client() as client:
        response = await collector.analyze_all("nobody_42", client=client)

    # a missing GitHub account still counts as neutral evidence
    assert response.sources_found == 1
    assert response.breakdown["github"].score == 50
    assert response.breakdown["github"].details == "No GitHub data"
    assert response.final_score == 50
    assert response.verdict == "NICE"
    assert response.user.profile_image == "https://unavatar.io/nobody_42"
    assert response.user.description == "Multi-platform analysis for nobody_42"


@pytest.mark.asyncio
async def test_github_profile_used_when_no_posts():
    recorder = Recorder({
        "api.github.com": github_api({
            "name": "Some One", "avatar_url": "https://a.example/1.png", "bio": "hi", "followers": 7,
        }),
    })
    async with recorder.client() as client:
        response = await collector.analyze_all("nobody_42", client=client)

    assert response.user.name == "Some One"
    assert response.user.profile_image == "https://a.example/1.png"
    assert response.user.followers == 7
    assert response.user.following == "—"


@pytest.mark.asyncio
async def test_one_failing_pipeline_does_not_abort_the_others(monkeypatch: pytest.MonkeyPatch):
    async def explode(fetcher, identifier):
        raise RuntimeError("scraper crashed")

    monkeypatch.setattr(collector, "run_news", explode)

    async with all_sources_up().client() as client:
        outcomes = await collector.collect_sources("someone", client)

    assert outcomes["news"][0].found is False
    assert outcomes["twitter"][0].found
    assert outcomes["reddit"][0].score == 47


@pytest.mark.asyncio
async def test_reddit_with_no_comments_counts_as_missing():
    recorder = Recorder({"www.reddit.com": lambda r: httpx.Response(200, json={"data": {"children": []}})})
    async with recorder.client() as client:
        outcomes = await collector.collect_sources("someone", client)

    assert outcomes["reddit"][0].found is False


@pytest.mark.asyncio
async def test_single_source_from_mirror():
    recorder = Recorder({"nitter.net": lambda r: httpx.Response(200, text=rss("so happy", "I hate mondays"))})
    async with recorder.client() as client:
        response = await collector.analyze_single("someone", client=client)

    assert not response.is_demo
    assert response.data_source == "nitter (nitter.net)"
    assert response.user.name == "Someone"
    assert response.analysis.total_analyzed == 2


@pytest.mark.asyncio
async def test_single_source_falls_back_to_cached_posts():
    async with Recorder().client() as client:
        response = await collector.analyze_single("NASA", client=client)

    assert response.data_source == "cached-real-data"
    assert response.user.name == "NASA"
    assert response.analysis.verdict == "NICE"


@pytest.mark.asyncio
async def test_single_source_demo_mode_is_deterministic():
    recorder = Recorder()
    async with recorder.client() as client:
        first = await collector.analyze_single("santa", demo=True, client=client)
        second = await collector.analyze_single("santa", demo=True, client=client)

    assert recorder.requests == []
    assert first.is_demo and first.data_source == "demo"
    assert first.user.name == "Santa Claus"
    assert first.analysis.total_analyzed == 50
    assert first == second


@pytest.mark.asyncio
async def test_single_source_uses_demo_when_nothing_found():
    async with Recorder().client() as client:
        response = await collector.analyze_single("nobody_42", client=client)

    assert response.is_demo
    assert response.user.description == "Demo profile for @nobody_42"


def configured_twitter_tokens() -> TokenCache:
    return TokenCache("Twitter", "https://api.twitter.com/oauth2/token", "key", "secret")


def twitter_api(search: httpx.Response, user: httpx.Response):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/oauth2/token":
            return httpx.Response(200, json={"access_token": "t", "token_type": "bearer"})
        if request.url.path.startswith("/2/users/by/username/"):
            return user
        return search
    return handler


@pytest.mark.asyncio
@pytest.mark.parametrize("search", [
    httpx.Response(200, json={"data": "oops"}),
    httpx.Response(200, json=[]),
    httpx.Response(502),
])
async def test_single_source_broken_search_api_still_uses_demo(monkeypatch, search):
    monkeypatch.setattr(collector, "TWITTER_TOKENS", configured_twitter_tokens())
    recorder = Recorder({"api.twitter.com": twitter_api(search, httpx.Response(404))})
    async with recorder.client() as client:
        response = await collector.analyze_single("nobody_42", client=client)

    assert response.is_demo
    assert response.data_source == "demo"
    assert "api.twitter.com" in recorder.hosts()


@pytest.mark.asyncio
async def test_single_source_cached_account_gets_live_stats(monkeypatch):
    monkeypatch.setattr(collector, "TWITTER_TOKENS", configured_twitter_tokens())
    user = httpx.Response(200, json={"data": {
        "username": "NASA", "name": "NASA", "public_metrics": {"followers_count": 90000000},
    }})
    recorder = Recorder({"api.twitter.com": twitter_api(httpx.Response(503), user)})
    async with recorder.client() as client:
        response = await collector.analyze_single("nasa", client=client)

    assert response.data_source == "cached-real-data"
    assert response.user.followers == 90000000
    assert response.user.profile_image == "https://unavatar.io/twitter/nasa"


@pytest.mark.asyncio
async def test_news_breakdown_lists_outlets():
    async with all_sources_up().client() as client:
        response = await collector.analyze_all("someone", client=client)

    assert response.breakdown["news"].outlets == ["example.com"]
