"""Mynx Reddit - async reddit client with throttled, lazy listing streams."""

from .api import RedditAPI
from .config import BASE_URL, DEFAULT_USER_AGENT, RedditConfig
from .core import (
    APIError,
    DecodeError,
    EntityKind,
    ForbiddenError,
    PaginationError,
    RateLimitError,
    RedditError,
    ReplyStatus,
    ValidationError,
    VoteDirection,
)
from .decoder import decode
from .endpoints import (
    api_url,
    reddit_url,
    subreddit_comments_url,
    subreddit_new_url,
    subreddit_top_url,
    subreddit_url,
    user_about_url,
    user_comments_url,
    user_url,
)
from .models import (
    Account,
    Comment,
    Entity,
    Link,
    Login,
    MoreMarker,
    ReplyResult,
    Thing,
    login_success,
)
from .runtime import (
    RequestThrottle,
    TTLCache,
    configure_default_throttle,
    filter_chunked,
    get_default_throttle,
    memoize_with_ttl,
)

__all__ = [
    # Facade
    "RedditAPI",
    # Configuration
    "RedditConfig",
    "BASE_URL",
    "DEFAULT_USER_AGENT",
    # Decoding and models
    "decode",
    "Thing",
    "Comment",
    "Link",
    "Account",
    "MoreMarker",
    "Entity",
    "Login",
    "ReplyResult",
    "login_success",
    # Enums
    "EntityKind",
    "ReplyStatus",
    "VoteDirection",
    # Exceptions
    "RedditError",
    "APIError",
    "RateLimitError",
    "ForbiddenError",
    "DecodeError",
    "PaginationError",
    "ValidationError",
    # URLs
    "reddit_url",
    "api_url",
    "subreddit_url",
    "subreddit_new_url",
    "subreddit_top_url",
    "subreddit_comments_url",
    "user_url",
    "user_about_url",
    "user_comments_url",
    # Runtime
    "RequestThrottle",
    "get_default_throttle",
    "configure_default_throttle",
    "TTLCache",
    "memoize_with_ttl",
    "filter_chunked",
]
