"""High-level client facade."""

from .actions import classify_reply, parse_login, session_cookie
from .reddit_api import RedditAPI

__all__ = ["RedditAPI", "classify_reply", "parse_login", "session_cookie"]
