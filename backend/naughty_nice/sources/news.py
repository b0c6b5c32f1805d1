"""
Web news fetcher scraping DuckDuckGo's HTML results page.

Extraction contract v1: two result shapes are read with named groups,
``result__snippet`` anchors (``body``) and ``result__a`` anchors (``href``,
``title``). When the page layout changes these patterns stop matching and
the fetcher returns no items; it never raises.
"""
from __future__ import annotations

import logging
import re
from typing import List

import httpx

from naughty_nice.config import HTTP_HEADERS, MAX_NEWS_RESULTS, MAX_NEWS_SNIPPETS
from naughty_nice.models import FetchResult, RawItem
from naughty_nice.sources.common import FEED_ENTITIES, decode_entities, strip_tags
from naughty_nice.utils import extract_domain_from_url

logger = logging.getLogger(__name__)

EXTRACTION_CONTRACT = "v1"

SNIPPET_PATTERN = re.compile(r'<a class="result__snippet"[^>]*>(?P<body>[\s\S]*?)</a>')
TITLE_PATTERN = re.compile(
    r'<a class="result__a"(?:[^>]*?href="(?P<href>[^"]*)")?[^>]*>(?P<title>[\s\S]*?)</a>'
)

# Snippets drop the apostrophe entity; titles only decode ampersands
SNIPPET_ENTITIES = FEED_ENTITIES[:4]
TITLE_ENTITIES = FEED_ENTITIES[:1]

MIN_SNIPPET_LENGTH = 20
MIN_TITLE_LENGTH = 10


def extract_news_items(html: str) -> List[RawItem]:
    """
    Pull snippet bodies, then link titles, out of a results page.

    Args:
        html: Results page markup

    Returns:
        Up to MAX_NEWS_SNIPPETS snippets followed by titles, MAX_NEWS_RESULTS in total
    """
    items: List[RawItem] = []

    for match in SNIPPET_PATTERN.finditer(html):
        if len(items) >= MAX_NEWS_SNIPPETS:
            break
        text = decode_entities(strip_tags(match.group("body"), ""), SNIPPET_ENTITIES).strip()
        if len(text) > MIN_SNIPPET_LENGTH:
            items.append(RawItem(text=text, source="news", raw={"kind": "snippet"}))

    for match in TITLE_PATTERN.finditer(html):
        if len(items) >= MAX_NEWS_RESULTS:
            break
        text = decode_entities(strip_tags(match.group("title"), ""), TITLE_ENTITIES).strip()
        if len(text) <= MIN_TITLE_LENGTH:
            continue
        href = decode_entities(match.group("href") or "", TITLE_ENTITIES)
        items.append(
            RawItem(
                text=text,
                source="news",
                link=href,
                raw={"kind": "title", "domain": extract_domain_from_url(href) if href else ""},
            )
        )

    return items


class NewsFetcher:
    """Keyword web search for news mentioning an identifier."""

    SEARCH_URL = "https://html.duckduckgo.com/html/"

    def __init__(self, client: httpx.AsyncClient) -> None:
        self.client = client

    async def fetch(self, search_term: str) -> FetchResult:
        try:
            response = await self.client.get(
                self.SEARCH_URL,
                params={"q": f"{search_term} news"},
                headers=HTTP_HEADERS,
            )
            html = response.text
        except httpx.HTTPError as e:
            logger.warning("News fetch failed: %s", e)
            return FetchResult.not_found()

        items = extract_news_items(html)
        logger.info("News: found %d snippets for %r", len(items), search_term)
        return FetchResult(items=items, found=bool(items), origin="duckduckgo")
