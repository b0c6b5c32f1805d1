"""
File: naughty_nice/models.py
Internal data structures used during collection/analysis.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


JsonDict = Dict[str, Any]


@dataclass
class RawItem:
    """A unit of text evidence from one source.

    Source-specific extras (karma, subreddit, event type, mirror) live in ``raw``.
    """

    text: str
    source: str  # "twitter" | "reddit" | "news" | "github"
    link: str = ""
    date: str = ""
    raw: JsonDict = field(default_factory=dict)


@dataclass
class FetchResult:
    """Outcome of one fetcher call. Fetchers never raise; failure is ``found=False``."""

    items: List[RawItem] = field(default_factory=list)
    found: bool = False
    origin: Optional[str] = None  # mirror host, "twitter-api", "cached-real-data", ...

    # Account metadata where the source exposes one (github profile, twitter author)
    profile: Optional[JsonDict] = None

    @classmethod
    def not_found(cls) -> "FetchResult":
        return cls(items=[], found=False)


__all__ = ["RawItem", "FetchResult", "JsonDict"]
