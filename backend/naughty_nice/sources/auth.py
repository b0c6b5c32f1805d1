"""
Client-credential bearer tokens with a lazily refreshed in-memory cache.
"""
from __future__ import annotations

import logging
import math
import time
from typing import Dict, Optional

import httpx

from naughty_nice.config import TOKEN_EXPIRY_MARGIN_SECONDS

logger = logging.getLogger(__name__)


class TokenCache:
    """
    Holds one app-only bearer token and its expiry timestamp.

    The token is re-acquired only when absent or when ``now`` has reached
    ``expires_at``. There is no explicit invalidation; a failed exchange
    leaves the previous state untouched. Concurrent refreshes are harmless,
    the last writer wins.
    """

    def __init__(
        self,
        name: str,
        token_url: str,
        client_id: str,
        client_secret: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        margin_seconds: float = TOKEN_EXPIRY_MARGIN_SECONDS,
    ) -> None:
        self.name = name
        self.token_url = token_url
        self.client_id = client_id
        self.client_secret = client_secret
        self.headers = headers or {}
        self.margin_seconds = margin_seconds

        self.token: Optional[str] = None
        self.expires_at: float = 0.0

    @property
    def configured(self) -> bool:
        return bool(self.client_id and self.client_secret)

    def is_valid(self, now: float) -> bool:
        return bool(self.token) and now < self.expires_at

    async def get_or_refresh(self, client: httpx.AsyncClient, now: Optional[float] = None) -> Optional[str]:
        """
        Return a usable bearer token, exchanging credentials if needed.

        Args:
            client: HTTP client used for the exchange
            now: Current UNIX time (defaults to ``time.time()``)

        Returns:
            The token, or None when credentials are missing or the exchange failed
        """
        now = time.time() if now is None else now
        if self.is_valid(now):
            return self.token

        if not self.configured:
            logger.info("%s credentials not configured", self.name)
            return None

        try:
            response = await client.post(
                self.token_url,
                data={"grant_type": "client_credentials"},
                auth=(self.client_id, self.client_secret),
                headers=self.headers,
            )
            response.raise_for_status()
            payload = response.json()
            token = payload["access_token"]
            if not isinstance(token, str) or not token:
                raise ValueError(f"unusable access_token {token!r}")

            # Tokens issued without a lifetime never expire on our side
            expires_in = payload.get("expires_in")
            expires_at = math.inf if expires_in is None else now + float(expires_in) - self.margin_seconds
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            logger.warning("%s auth failed: %s", self.name, e)
            return None

        self.token = token
        self.expires_at = expires_at

        logger.info("%s bearer token obtained", self.name)
        return token
