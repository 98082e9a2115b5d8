"""HTTP client helper."""

from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass, field
from typing import Any

import aiohttp

from ...core.exceptions import APIError


@dataclass(frozen=True)
class RawResponse:
    """Status, headers and body of a completed request."""

    status: int
    headers: dict[str, str]
    body: str
    set_cookies: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def json(self) -> Any:
        return json.loads(self.body)


class HTTPClient:
    """Async HTTP client wrapper."""

    def __init__(self, base_url: str | None = None, timeout: float = 30.0) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def request(
        self,
        method: str,
        url: str,
        params: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> RawResponse:
        """Send a request and read the whole response.

        Non-2xx statuses are returned, not raised; the caller decides.

        Raises:
            APIError: If no response was received (network error or timeout)
        """
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            url = f"{self.base_url}{url}"

        try:
            async with self.session.request(
                method, url, params=params, data=data, headers=headers
            ) as response:
                body = await response.text()
                return RawResponse(
                    status=response.status,
                    headers=dict(response.headers),
                    body=body,
                    set_cookies=list(response.headers.getall("Set-Cookie", [])),
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise APIError(f"{method} {url} failed: {exc}", url=url) from exc

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
