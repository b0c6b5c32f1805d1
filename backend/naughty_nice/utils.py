"""
Shared utility functions for the naughty-or-nice application.
"""
from __future__ import annotations

import math
import re
from datetime import datetime, timezone
from urllib.parse import urlparse

import tldextract

# Bundled public suffix snapshot only; never fetch the list at request time
_extract = tldextract.TLDExtract(suffix_list_urls=())


def now_utc() -> datetime:
    """
    Get current UTC datetime with timezone information.

    Returns:
        Current UTC datetime
    """
    return datetime.now(timezone.utc)


def normalize_text(text: str | None) -> str:
    """
    Normalize whitespace in text content.

    Args:
        text: Input text string (can be None)

    Returns:
        Normalized text with single spaces and trimmed edges
    """
    if not text:
        return ""
    return re.sub(r"\s+", " ", text).strip()


def normalize_identifier(value: str | None) -> str:
    """
    Turn a user-supplied handle into the identifier shared by every source.

    Surrounding whitespace and one leading ``@`` are removed.

    Raises:
        ValueError: If nothing is left after normalization
    """
    identifier = (value or "").strip()
    if identifier.startswith("@"):
        identifier = identifier[1:].strip()
    if not identifier:
        raise ValueError("Username is required")
    return identifier


def extract_domain_from_url(url: str) -> str:
    """
    Extract the main domain from a URL.

    Args:
        url: Full URL string

    Returns:
        Normalized domain name in lowercase
    """
    try:
        extracted = _extract(url)
        domain = f"{extracted.domain}.{extracted.suffix}" if extracted.suffix else extracted.domain
        return (domain or urlparse(url).netloc).lower()
    except ValueError:
        return urlparse(url).netloc.lower()


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (2.5 -> 3, not 2)."""
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> int:
    """
    Clamp a score to the range [0, 100].

    Args:
        value: Raw score, possibly out of range

    Returns:
        Integer score between 0 and 100
    """
    return int(max(0, min(100, value)))


def display_name(identifier: str) -> str:
    """Capitalize the first letter of a handle for display ("santa" -> "Santa")."""
    return identifier[:1].upper() + identifier[1:]
