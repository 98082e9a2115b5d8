"""Data models for decoded reddit objects.

All entity models are Pydantic v2 models with ``frozen=True`` and
``extra="allow"``: every field reddit sends is carried through untouched,
while the fields the decoder derives (``time``, ``score``, absolute
``permalink``, ``body``) are typed.

Model Categories:
    - Entities: Thing, Comment, Link, Account, MoreMarker
    - Session: Login
    - Actions: ReplyResult
"""

from typing import Union

from .account import Account
from .comment import DELETED_BODY, Comment
from .link import Link
from .login import Login, ReplyResult, login_success
from .more import MoreMarker
from .thing import Thing

Entity = Union[Comment, Link, Account, MoreMarker]

__all__ = [
    "Account",
    "Comment",
    "DELETED_BODY",
    "Entity",
    "Link",
    "Login",
    "MoreMarker",
    "ReplyResult",
    "Thing",
    "login_success",
]
