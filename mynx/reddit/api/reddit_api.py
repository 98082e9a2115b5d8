"""RedditAPI facade.

One object that owns a throttled, optionally cached transport and exposes
reddit as decoded entities and lazy entity streams.

Architecture:
    RedditAPI -> RESTTransport (throttle, cache, headers) -> HTTPClient
    Listing streams are built from runtime.paging over ``get_parsed``.

Design Decisions:
    - The login and user agent live on the instance instead of in globals;
      every method also takes per-call ``login=``/``user_agent=`` overrides
    - All instances share the process-wide throttle unless one is injected,
      so several clients still respect a single request budget
    - Context manager pattern ensures the HTTP session is closed
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from datetime import UTC, datetime
from typing import Any

from ..config import RedditConfig
from ..core.enums import ReplyStatus, VoteDirection
from ..core.exceptions import DecodeError, ForbiddenError, ValidationError
from ..decoder import decode
from ..endpoints import api_url, user_about_url
from ..models import Account, Comment, Link, Login, ReplyResult, Thing
from ..runtime.paging import ListingQuery, items_since, paginate, poll
from ..runtime.rest import HTTPClient, RESTTransport
from ..runtime.throttle import RequestThrottle
from .actions import classify_reply, parse_login

logger = logging.getLogger(__name__)


class RedditAPI:
    """High-level reddit client.

    Example:
        >>> async with RedditAPI(user_agent="my-bot/0.1") as api:
        ...     url = subreddit_comments_url("python")
        ...     async for comment in api.new_items(url):
        ...         print(comment.author, comment.body)
    """

    def __init__(
        self,
        config: RedditConfig | None = None,
        *,
        login: Login | None = None,
        user_agent: str | None = None,
        throttle: RequestThrottle | None = None,
        http: HTTPClient | None = None,
        transport: RESTTransport | None = None,
    ) -> None:
        """Initialize RedditAPI.

        Args:
            config: Client configuration (defaults to RedditConfig())
            login: Login sent with every request unless overridden
            user_agent: User-Agent sent with every request unless overridden
            throttle: Request gate (defaults to the process-wide throttle)
            http: HTTP client to use (for testing)
            transport: Fully built transport (for testing); overrides the above
        """
        self.config = config or RedditConfig()
        self._transport = transport or RESTTransport(
            self.config,
            http=http,
            throttle=throttle,
            login=login,
            user_agent=user_agent,
        )

    @property
    def transport(self) -> RESTTransport:
        return self._transport

    @property
    def login_info(self) -> Login | None:
        return self._transport.login

    @property
    def user_agent(self) -> str:
        return self._transport.user_agent

    def set_login(self, login: Login | None) -> None:
        """Use ``login`` for subsequent requests (None to go anonymous)."""
        self._transport.login = login

    def set_user_agent(self, user_agent: str) -> None:
        self._transport.user_agent = user_agent

    # ----------------------
    # Retrieval
    # ----------------------
    async def get_parsed(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        *,
        login: Login | None = None,
        user_agent: str | None = None,
    ) -> Any:
        """Fetch a reddit page and decode it into entities."""
        raw = await self._transport.get_json(url, params, login=login, user_agent=user_agent)
        return decode(raw, base_url=self.config.site_url)

    def _listing(self, url: str, params: dict[str, Any] | None = None) -> ListingQuery:
        return ListingQuery.create(
            url, params, limit=self.config.page_limit, sort=self.config.sort
        )

    async def _fetch_page(self, url: str, params: dict[str, Any]) -> Any:
        return await self.get_parsed(url, params)

    def items(self, url: str, params: dict[str, Any] | None = None) -> AsyncIterator[Any]:
        """Every entity of the listing at ``url``, across all pages, lazily.

        Args:
            url: Listing URL, e.g. ``subreddit_comments_url("python")``
            params: Extra query parameters; ``limit``/``sort`` override defaults
        """
        return paginate(self._fetch_page, self._listing(url, params))

    def items_since(
        self,
        url: str,
        since: datetime,
        params: dict[str, Any] | None = None,
    ) -> AsyncIterator[Any]:
        """Entities of a newest-first listing posted strictly after ``since``."""
        return items_since(
            self._fetch_page,
            self._listing(url, params),
            since,
            window=self.config.chunk_window,
        )

    def new_items(
        self,
        url: str,
        since: datetime | None = None,
        params: dict[str, Any] | None = None,
    ) -> AsyncIterator[Any]:
        """Endless stream of entities posted after ``since`` (default: now).

        Items arrive oldest first within each polling round. Stop iterating
        to stop polling.
        """
        return poll(
            self._fetch_page,
            self._listing(url, params),
            since if since is not None else datetime.now(UTC),
            window=self.config.chunk_window,
        )

    async def get_link(self, permalink: str) -> Link:
        """Link at ``permalink`` with its comment tree as ``replies``."""
        page = await self.get_parsed(permalink)
        if not isinstance(page, list) or len(page) < 2 or not page[0]:
            raise DecodeError(f"{permalink} is not a link page")
        link = page[0][0]
        if not isinstance(link, Link):
            raise DecodeError(f"{permalink} did not start with a link", kind="t3")
        return link.model_copy(update={"replies": list(page[1] or [])})

    async def get_comments(self, permalink: str) -> list[Thing]:
        """Top-level comments of a link page."""
        link = await self.get_link(permalink)
        return link.replies

    async def get_comment(self, permalink: str) -> Comment | None:
        """The first comment at ``permalink`` (a comment permalink)."""
        comments = await self.get_comments(permalink)
        return comments[0] if comments else None

    async def me(self, *, login: Login | None = None) -> Account:
        """Account of the logged-in user."""
        return await self.get_parsed(
            api_url("me", base_url=self.config.site_url), login=login
        )

    async def get_user(self, username: str) -> Account:
        return await self.get_parsed(user_about_url(username, base_url=self.config.site_url))

    # ----------------------
    # Account and actions
    # ----------------------
    async def login(self, user: str, password: str) -> Login:
        """Log in and return the resulting Login.

        A rejected login does not raise; check ``Login.succeeded``. Pass the
        result to ``set_login`` to authenticate later requests.

        Raises:
            APIError: On transport failure or a non-2xx response
        """
        response = await self._transport.post(
            api_url("login", base_url=self.config.site_url),
            {"user": user, "passwd": password, "api_type": "json"},
        )
        return parse_login(user, response)

    async def reply(
        self, parent: Thing, text: str, *, login: Login | None = None
    ) -> ReplyResult:
        """Post ``text`` as a reply to a link or comment."""
        try:
            response = await self._transport.post(
                api_url("comment", base_url=self.config.site_url),
                {"thing_id": parent.name, "text": text},
                login=login,
            )
        except ForbiddenError:
            return ReplyResult(status=ReplyStatus.FORBIDDEN)
        return classify_reply(response.body)

    async def vote(
        self,
        item: Thing,
        direction: VoteDirection | str | int,
        *,
        login: Login | None = None,
    ) -> None:
        """Vote on a link or comment; ``direction`` is up, none or down.

        Raises:
            ValidationError: If ``direction`` is not a vote direction
        """
        try:
            if isinstance(direction, str):
                direction = VoteDirection[direction.upper()]
            else:
                direction = VoteDirection(direction)
        except (KeyError, ValueError) as exc:
            raise ValidationError(
                f"Invalid vote direction {direction!r}; expected up, none or down"
            ) from exc
        await self._transport.post(
            api_url("vote", base_url=self.config.site_url),
            {"id": item.name, "dir": int(direction)},
            login=login,
        )

    async def delete(self, item: Thing, *, login: Login | None = None) -> None:
        await self._transport.post(
            api_url("del", base_url=self.config.site_url),
            {"id": item.name},
            login=login,
        )

    # ----------------------
    # Caching and lifecycle
    # ----------------------
    def enable_caching(self, ttl_ms: int | None = None) -> None:
        self._transport.enable_caching(ttl_ms)

    def disable_caching(self) -> None:
        self._transport.disable_caching()

    @property
    def caching_enabled(self) -> bool:
        return self._transport.caching_enabled

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self._transport.close()

    async def __aenter__(self) -> RedditAPI:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
