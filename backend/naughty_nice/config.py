"""
Application configuration with environment variable support.
"""
from __future__ import annotations

import os
from typing import Dict

from pydantic_settings import BaseSettings, SettingsConfigDict


def _get_env_float(key: str, default: float) -> float:
    """Get float value from environment variable with fallback."""
    try:
        return float(os.getenv(key, default))
    except (ValueError, TypeError):
        return default


def _get_env_int(key: str, default: int) -> int:
    """Get integer value from environment variable with fallback."""
    try:
        return int(os.getenv(key, default))
    except (ValueError, TypeError):
        return default


def _get_env_list(key: str, default: list[str], separator: str = ",") -> list[str]:
    """Get list value from environment variable with fallback."""
    value = os.getenv(key)
    if not value:
        return default
    return [item.strip() for item in value.split(separator) if item.strip()]


class Settings(BaseSettings):
    """Credentials for the outbound collaborators. All optional."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    TWITTER_API_KEY: str = ""
    TWITTER_API_SECRET_KEY: str = ""
    REDDIT_CLIENT_ID: str = ""
    REDDIT_CLIENT_SECRET: str = ""
    OPENAI_API_KEY: str = ""
    PORT: int = 3001


settings = Settings()

# Source weights for the aggregate verdict (0.0 to 1.0)
# Missing sources are dropped from both sides of the weighted mean
SCORE_WEIGHTS: Dict[str, float] = {
    "twitter": 0.30,
    "reddit": 0.30,
    "news": 0.30,
    "github": 0.10,
}

NEUTRAL_SCORE: int = 50

# Microblog mirrors, tried in this order
NITTER_INSTANCES: list[str] = _get_env_list(
    "NITTER_INSTANCES",
    [
        "nitter.net",
        "nitter.poast.org",
        "nitter.privacydev.net",
        "nitter.1d4.us",
        "nitter.kavin.rocks",
        "nitter.unixfox.eu",
    ],
)
MIRROR_TIMEOUT_SECONDS: float = _get_env_float("MIRROR_TIMEOUT_SECONDS", 10.0)
HTTP_TIMEOUT_SECONDS: float = _get_env_float("HTTP_TIMEOUT_SECONDS", 15.0)

# Fetch limits
REDDIT_COMMENT_LIMIT: int = _get_env_int("REDDIT_COMMENT_LIMIT", 50)
GITHUB_EVENTS_PER_PAGE: int = _get_env_int("GITHUB_EVENTS_PER_PAGE", 30)
TWITTER_SEARCH_MAX_RESULTS: int = _get_env_int("TWITTER_SEARCH_MAX_RESULTS", 100)
MAX_NEWS_SNIPPETS: int = 20
MAX_NEWS_RESULTS: int = 30

# Reddit tokens are treated as expired this many seconds early
TOKEN_EXPIRY_MARGIN_SECONDS: float = 60.0

# HTTP Client Configuration
BROWSER_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
APP_USER_AGENT = "NaughtyNiceChecker/1.0"
HTTP_HEADERS = {"User-Agent": BROWSER_USER_AGENT}
GITHUB_HEADERS = {
    "User-Agent": APP_USER_AGENT,
    "Accept": "application/vnd.github.v3+json",
}

# Assistant
ASSISTANT_MODEL: str = os.getenv("ASSISTANT_MODEL", "gpt-4o-mini")
ASSISTANT_MAX_TOKENS: int = _get_env_int("ASSISTANT_MAX_TOKENS", 1024)
ASSISTANT_CONTEXT_ITEMS: int = 15

# CORS Configuration
CORS_ALLOW_ORIGINS: list[str] = _get_env_list("CORS_ALLOW_ORIGINS", ["*"])

# Logging Configuration
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT: str = os.getenv(
    "LOG_FORMAT",
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
