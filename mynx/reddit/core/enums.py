"""Core enumerations shared by the decoder, models and actions.

Key Types:
    - EntityKind: Discriminant of decoded reddit objects
    - VoteDirection: Vote value sent to api/vote
    - ReplyStatus: Classified outcome of api/comment
"""

from enum import Enum


class EntityKind(str, Enum):
    """Discriminant carried by every decoded entity.

    Reddit tags raw objects with type prefixes (``t1``, ``t2``, ``t3``,
    ``more``); the decoder maps them onto these readable kinds.
    """

    COMMENT = "comment"
    LINK = "link"
    ACCOUNT = "account"
    MORE = "more"


class VoteDirection(int, Enum):
    """Vote direction as understood by api/vote."""

    UP = 1
    NONE = 0
    DOWN = -1


class ReplyStatus(str, Enum):
    """Outcome of posting a reply."""

    SUBMITTED = "submitted"
    RATE_LIMIT = "rate_limit"
    USER_REQUIRED = "user_required"
    PARENT_DELETED = "parent_deleted"
    FORBIDDEN = "forbidden"
    UNKNOWN = "unknown"
