"""
Common utilities for source fetchers.
"""
from __future__ import annotations

import logging
import re
from typing import Iterable, Optional, Tuple
from urllib.parse import urljoin

import httpx
from dateutil import parser as dateparser

from naughty_nice.config import HTTP_HEADERS, HTTP_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)

# Entities decoded by the scrapers, applied in this order
FEED_ENTITIES: Tuple[Tuple[str, str], ...] = (
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
)

_TAG_RE = re.compile(r"<[^>]+>")
_REDIRECT_CODES = (301, 302)


class SourceUnavailable(Exception):
    """A source answered with something other than usable content."""


def new_client() -> httpx.AsyncClient:
    """Client shared by all fetchers of one pipeline run."""
    return httpx.AsyncClient(headers=HTTP_HEADERS, timeout=HTTP_TIMEOUT_SECONDS)


async def fetch_text(
    client: httpx.AsyncClient,
    url: str,
    *,
    headers: Optional[dict] = None,
    timeout: Optional[float] = None,
    redirects_left: int = 1,
) -> str:
    """
    GET a URL and return the body of a 200 response.

    A 301/302 is followed by hand, at most ``redirects_left`` hops.

    Args:
        client: Shared HTTP client
        url: Absolute URL to fetch
        headers: Extra request headers
        timeout: Per-request timeout in seconds (client default when None)
        redirects_left: Remaining redirect budget

    Returns:
        Response body as text

    Raises:
        SourceUnavailable: Non-200 status, missing Location or exhausted redirect budget
        httpx.HTTPError: Transport errors and timeouts
    """
    request_timeout = timeout if timeout is not None else client.timeout
    response = await client.get(url, headers=headers, timeout=request_timeout, follow_redirects=False)

    if response.status_code in _REDIRECT_CODES:
        location = response.headers.get("location")
        if not location or redirects_left <= 0:
            raise SourceUnavailable(f"HTTP {response.status_code} (redirect not followed)")
        return await fetch_text(
            client,
            urljoin(url, location),
            headers=headers,
            timeout=timeout,
            redirects_left=redirects_left - 1,
        )

    if response.status_code != 200:
        raise SourceUnavailable(f"HTTP {response.status_code}")

    return response.text


def strip_tags(markup: str, replacement: str = " ") -> str:
    """Remove anything that looks like an HTML tag."""
    return _TAG_RE.sub(replacement, markup or "")


def decode_entities(text: str, entities: Iterable[Tuple[str, str]] = FEED_ENTITIES) -> str:
    """
    Decode a fixed set of HTML entities.

    Only the listed entities are touched; anything else is left as-is.
    """
    for entity, char in entities:
        text = text.replace(entity, char)
    return text


def normalize_date(date_string: Optional[str]) -> str:
    """
    Normalize a feed date to ISO-8601.

    Args:
        date_string: Date in any format dateutil understands, or None

    Returns:
        ISO-8601 string, or the input unchanged if it cannot be parsed
    """
    if not date_string or not isinstance(date_string, str):
        return ""
    try:
        return dateparser.parse(date_string).isoformat()
    except (ValueError, OverflowError):
        return date_string
