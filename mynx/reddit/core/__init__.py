"""Core components."""

from .enums import EntityKind, ReplyStatus, VoteDirection
from .exceptions import (
    APIError,
    DecodeError,
    ForbiddenError,
    PaginationError,
    RateLimitError,
    RedditError,
    ValidationError,
)

__all__ = [
    "EntityKind",
    "ReplyStatus",
    "VoteDirection",
    "RedditError",
    "APIError",
    "RateLimitError",
    "ForbiddenError",
    "DecodeError",
    "PaginationError",
    "ValidationError",
]
