"""Shared client configuration.

This module centralizes the base URL, default request headers and the
throttle/cache/paging tunables so the transport, paging layer and API facade
read them from one place.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

BASE_URL = "https://www.reddit.com"

DEFAULT_USER_AGENT = "Mynx, reddit API for Python"

# Reddit asks API clients for at most one request every two seconds.
DEFAULT_THROTTLE_INTERVAL_MS = 2000

# Two minutes: long enough to absorb repeated page loads while testing.
DEFAULT_CACHE_TTL_MS = 2 * 60 * 1000

DEFAULT_PAGE_LIMIT = 1000
DEFAULT_SORT = "new"

# Consecutive items that must all fail a time predicate before a
# "since" query gives up on an out-of-order listing.
DEFAULT_CHUNK_WINDOW = 10

DEFAULT_TIMEOUT = 30.0

CACHE_BUST_PARAM = "rand-int"
CACHE_BUST_MAX = 1_000_000


@dataclass(frozen=True)
class RedditConfig:
    """Client configuration.

    Attributes:
        base_url: Site root used for URL templates and permalinks
        user_agent: Default User-Agent header
        throttle_interval_ms: Expected gap between request starts; clients using
            the shared throttle log a mismatch (see configure_default_throttle)
        cache_ttl_ms: Lifetime of a cached page when caching is enabled
        page_limit: Default ``limit`` query parameter for listings
        sort: Default ``sort`` query parameter for listings
        chunk_window: Window size used by "since" queries
        timeout: Total HTTP timeout in seconds
        cache_bust: Add a random query parameter to each outbound request
    """

    base_url: str = BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    throttle_interval_ms: int = DEFAULT_THROTTLE_INTERVAL_MS
    cache_ttl_ms: int = DEFAULT_CACHE_TTL_MS
    page_limit: int = DEFAULT_PAGE_LIMIT
    sort: str = DEFAULT_SORT
    chunk_window: int = DEFAULT_CHUNK_WINDOW
    timeout: float = DEFAULT_TIMEOUT
    cache_bust: bool = True

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.throttle_interval_ms < 0:
            raise ValueError("throttle_interval_ms must be >= 0")
        if self.cache_ttl_ms <= 0:
            raise ValueError("cache_ttl_ms must be > 0")
        if self.page_limit <= 0:
            raise ValueError("page_limit must be > 0")
        if self.chunk_window <= 0:
            raise ValueError("chunk_window must be > 0")
        if self.timeout <= 0:
            raise ValueError("timeout must be > 0")
        if not self.base_url.startswith("http"):
            raise ValueError("base_url must be an http(s) URL")

    @property
    def site_url(self) -> str:
        """Base URL without a trailing slash."""
        return self.base_url.rstrip("/")

    def replace(self, **changes: object) -> RedditConfig:
        """Return a copy with the given fields changed."""
        return replace(self, **changes)
