"""REST transport: headers, throttling and optional caching over HTTPClient.

Every outbound request passes through the shared RequestThrottle. JSON reads
(``get_json``) can additionally be memoized with a TTLCache that sits in front
of the throttle, so a cache hit costs neither a request nor a wait.
"""

from __future__ import annotations

import json
import logging
import random
from collections.abc import Awaitable, Callable
from typing import Any

from ...config import CACHE_BUST_MAX, CACHE_BUST_PARAM, RedditConfig
from ...core.exceptions import APIError, ForbiddenError, RateLimitError
from ...models import Login
from ..cache import TTLCache
from ..throttle import RequestThrottle, get_default_throttle
from .http_client import HTTPClient, RawResponse

logger = logging.getLogger(__name__)

JsonFetcher = Callable[..., Awaitable[Any]]


def json_url(url: str) -> str:
    """Append reddit's ``.json`` suffix to a page URL.

    >>> json_url("https://www.reddit.com/r/python/new/")
    'https://www.reddit.com/r/python/new.json'
    """
    path, sep, query = url.partition("?")
    path = path.rstrip("/")
    if not path.endswith(".json"):
        path += ".json"
    return path + sep + query


def clean_params(params: dict[str, Any] | None) -> dict[str, str | int | float]:
    """Drop unset values and stringify booleans so aiohttp accepts the query."""
    cleaned: dict[str, str | int | float] = {}
    for key, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, bool):
            cleaned[key] = "true" if value else "false"
        elif isinstance(value, (int, float, str)):
            cleaned[key] = value
        else:
            cleaned[key] = str(value)
    return cleaned


def raise_for_status(response: RawResponse, url: str) -> None:
    """Raise the matching APIError for a non-2xx response."""
    if response.ok:
        return
    message = f"HTTP {response.status} for {url}"
    if response.status == 429:
        raise RateLimitError(message, url=url)
    if response.status == 403:
        raise ForbiddenError(message, url=url)
    raise APIError(message, status_code=response.status, url=url)


class RESTTransport:
    """Throttled, optionally cached access to reddit pages and API endpoints."""

    def __init__(
        self,
        config: RedditConfig | None = None,
        *,
        http: HTTPClient | None = None,
        throttle: RequestThrottle | None = None,
        login: Login | None = None,
        user_agent: str | None = None,
    ) -> None:
        """Initialize transport.

        Args:
            config: Client configuration (defaults to RedditConfig())
            http: HTTP client (created from config if omitted)
            throttle: Request gate (if omitted, the process-wide throttle, used
                as is; a differing ``config.throttle_interval_ms`` is logged)
            login: Login used when a call does not pass its own
            user_agent: User-Agent used when a call does not pass its own
        """
        self.config = config or RedditConfig()
        self._http = http or HTTPClient(timeout=self.config.timeout)
        if throttle is None:
            throttle = get_default_throttle()
            if throttle.interval_ms != self.config.throttle_interval_ms:
                logger.warning(
                    "throttle_interval_mismatch",
                    extra={
                        "configured_ms": self.config.throttle_interval_ms,
                        "shared_ms": throttle.interval_ms,
                    },
                )
        self._throttle = throttle
        self.login = login
        self.user_agent = user_agent or self.config.user_agent
        self._cache: TTLCache[Any] | None = None
        self._fetch_json: JsonFetcher = self._get_json_uncached

    @property
    def throttle(self) -> RequestThrottle:
        return self._throttle

    @property
    def caching_enabled(self) -> bool:
        return self._cache is not None

    def build_headers(
        self, login: Login | None = None, user_agent: str | None = None
    ) -> dict[str, str]:
        headers = {"User-Agent": user_agent or self.user_agent}
        active = login or self.login
        if active is not None:
            headers.update(active.headers())
        return headers

    async def request(
        self,
        method: str,
        url: str,
        params: dict[str, Any] | None = None,
        *,
        login: Login | None = None,
        user_agent: str | None = None,
    ) -> RawResponse:
        """Send a throttled GET or POST.

        GET parameters go in the query string; POST parameters are sent as a
        form body. Non-2xx responses are returned as-is.
        """
        method = method.upper()
        fields = clean_params(params)
        query: dict[str, str | int | float] = fields if method == "GET" else {}
        if self.config.cache_bust:
            query = {**query, CACHE_BUST_PARAM: random.randrange(CACHE_BUST_MAX)}
        form = fields if method != "GET" else None
        return await self._throttle.call(
            self._http.request,
            method,
            url,
            params=query or None,
            data=form,
            headers=self.build_headers(login, user_agent),
        )

    async def get_json(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        *,
        login: Login | None = None,
        user_agent: str | None = None,
    ) -> Any:
        """Fetch a page as JSON; ``.json`` is appended to the URL.

        Raises:
            APIError: On transport failure, non-2xx status or a non-JSON body
        """
        # Resolve defaults here so the cache key carries the effective credentials.
        return await self._fetch_json(
            json_url(url),
            params,
            login=login or self.login,
            user_agent=user_agent or self.user_agent,
        )

    async def post(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        *,
        login: Login | None = None,
        user_agent: str | None = None,
    ) -> RawResponse:
        """POST form parameters; raises on non-2xx like ``get_json``."""
        response = await self.request("POST", url, params, login=login, user_agent=user_agent)
        raise_for_status(response, url)
        return response

    async def _get_json_uncached(
        self,
        url: str,
        params: dict[str, Any] | None,
        *,
        login: Login | None = None,
        user_agent: str | None = None,
    ) -> Any:
        response = await self.request("GET", url, params, login=login, user_agent=user_agent)
        raise_for_status(response, url)
        try:
            return response.json()
        except json.JSONDecodeError as exc:
            raise APIError(
                f"Invalid JSON from {url}", status_code=response.status, url=url
            ) from exc

    # ----------------------
    # Caching
    # ----------------------
    def enable_caching(self, ttl_ms: int | None = None) -> None:
        """Memoize ``get_json`` results for ``ttl_ms`` (config default if omitted).

        Repeated loads of the same page otherwise make reddit answer 304.
        Enabling twice keeps the existing cache.
        """
        if self._cache is not None:
            return
        self._cache = TTLCache(self._get_json_uncached, ttl_ms or self.config.cache_ttl_ms)
        self._fetch_json = self._cache
        logger.info("caching_enabled", extra={"ttl_ms": self._cache.ttl_ms})

    def disable_caching(self) -> None:
        """Go back to direct requests, discarding cached pages."""
        if self._cache is None:
            return
        self._cache = None
        self._fetch_json = self._get_json_uncached
        logger.info("caching_disabled")

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> RESTTransport:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
