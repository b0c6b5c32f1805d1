from __future__ import annotations

from typing import Callable, Dict, List, Optional

import httpx
import pytest

from naughty_nice.sources import collector
from naughty_nice.sources.auth import TokenCache

Handler = Callable[[httpx.Request], httpx.Response]


def rss(*posts: str) -> str:
    """Minimal Nitter-style RSS document with one item per post."""
    items = "".join(
        f"<item><title><![CDATA[{p}]]></title>"
        f"<description><![CDATA[<p>{p}</p>]]></description>"
        f"<link>https://nitter.net/someone/status/{i}</link>"
        f"<pubDate>Mon, 01 Jan 2024 10:00:00 GMT</pubDate></item>"
        for i, p in enumerate(posts)
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?><rss version="2.0"><channel>'
        "<title>someone / X</title><link>https://nitter.net/someone</link>"
        f"<description>feed</description>{items}</channel></rss>"
    )


class Recorder:
    """MockTransport handler that routes by host and remembers every request."""

    def __init__(self, routes: Optional[Dict[str, Handler]] = None, default: int = 404) -> None:
        self.routes = routes or {}
        self.default = default
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get(request.url.host)
        if handler is None:
            return httpx.Response(self.default)
        return handler(request)

    def hosts(self) -> List[str]:
        return [r.url.host for r in self.requests]

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


def unconfigured_tokens(name: str = "test") -> TokenCache:
    return TokenCache(name, "https://auth.example/token", "", "")


@pytest.fixture(autouse=True)
def _no_credentials(monkeypatch: pytest.MonkeyPatch):
    """Process-wide token caches never hit the network in tests."""
    monkeypatch.setattr(collector, "REDDIT_TOKENS", unconfigured_tokens("Reddit"))
    monkeypatch.setattr(collector, "TWITTER_TOKENS", unconfigured_tokens("Twitter"))
