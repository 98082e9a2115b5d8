"""Reddit URL templates.

Listing helpers return URLs with a trailing slash and without the ``.json``
suffix; the transport appends the suffix when fetching.

Examples:
    >>> subreddit_url("python")
    'https://www.reddit.com/r/python/'
    >>> subreddit_url(["python", "rust"])
    'https://www.reddit.com/r/python+rust/'
    >>> user_comments_url("spez")
    'https://www.reddit.com/user/spez/comments/'
"""

from __future__ import annotations

from collections.abc import Iterable

from .config import BASE_URL
from .core.exceptions import ValidationError


def reddit_url(*parts: str, base_url: str = BASE_URL) -> str:
    """Join path parts onto the site root: ``reddit_url("api", "me")``."""
    return "/".join([base_url.rstrip("/"), *(str(p).strip("/") for p in parts)])


def api_url(name: str, *, base_url: str = BASE_URL) -> str:
    """URL of an ``/api/<name>`` endpoint."""
    return reddit_url("api", name, base_url=base_url)


def subreddit_url(names: str | Iterable[str], *, base_url: str = BASE_URL) -> str:
    """URL of a subreddit, or of several combined with ``+``."""
    if isinstance(names, str):
        joined = names
    else:
        joined = "+".join(str(n) for n in names)
    if not joined:
        raise ValidationError("At least one subreddit name is required")
    return reddit_url("r", joined, base_url=base_url) + "/"


def subreddit_new_url(names: str | Iterable[str], *, base_url: str = BASE_URL) -> str:
    """New links page for the given subreddit(s)."""
    return subreddit_url(names, base_url=base_url) + "new/"


def subreddit_top_url(names: str | Iterable[str], *, base_url: str = BASE_URL) -> str:
    """Top links page for the given subreddit(s)."""
    return subreddit_url(names, base_url=base_url) + "top/"


def subreddit_comments_url(names: str | Iterable[str], *, base_url: str = BASE_URL) -> str:
    """New comments page for the given subreddit(s)."""
    return subreddit_url(names, base_url=base_url) + "comments/"


def user_url(username: str, *, base_url: str = BASE_URL) -> str:
    """A user's overview page."""
    if not username:
        raise ValidationError("username must be a non-empty string")
    return reddit_url("user", username, base_url=base_url) + "/"


def user_about_url(username: str, *, base_url: str = BASE_URL) -> str:
    return user_url(username, base_url=base_url) + "about/"


def user_comments_url(username: str, *, base_url: str = BASE_URL) -> str:
    return user_url(username, base_url=base_url) + "comments/"
