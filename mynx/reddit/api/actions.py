"""Parsing of account and action responses.

Reddit answers login and comment posts with bodies that need interpretation
rather than a status code: a rejected login is a 200 with an ``errors`` list,
and the comment endpoint reports rate limiting or a deleted parent inside the
body. The helpers here turn those bodies into Login and ReplyResult values.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from ..core.enums import ReplyStatus
from ..core.exceptions import APIError
from ..models import Login, ReplyResult
from ..runtime.rest import RawResponse

logger = logging.getLogger(__name__)

UNKNOWN_LOGIN_ERROR = "unknown"

# Checked in order; the first pattern found in the body decides the status.
_REPLY_PATTERNS: list[tuple[re.Pattern[str], ReplyStatus]] = [
    (re.compile(r"contentText"), ReplyStatus.SUBMITTED),
    (re.compile(r".error.RATELIMIT.field-ratelimit"), ReplyStatus.RATE_LIMIT),
    (re.compile(r".error.USER_REQUIRED"), ReplyStatus.USER_REQUIRED),
    (re.compile(r".error.DELETED_COMMENT.field-parent"), ReplyStatus.PARENT_DELETED),
    (re.compile(r".error.DELETED_LINK.field-parent"), ReplyStatus.PARENT_DELETED),
]


def session_cookie(response: RawResponse) -> str | None:
    """First ``Set-Cookie`` value without its attributes."""
    if not response.set_cookies:
        return None
    return response.set_cookies[0].split(";", 1)[0].strip() or None


def parse_login(user: str, response: RawResponse) -> Login:
    """Build a Login from the ``api/login`` response.

    The login succeeded iff ``json.data.modhash`` is present. Otherwise the
    returned Login carries reddit's ``json.errors`` (or ``["unknown"]``).

    Raises:
        APIError: If the body is not JSON
    """
    try:
        payload: Any = response.json()
    except json.JSONDecodeError as exc:
        raise APIError(
            "Invalid JSON from login endpoint", status_code=response.status
        ) from exc

    body = payload.get("json", {}) if isinstance(payload, dict) else {}
    data = body.get("data") or {}
    modhash = data.get("modhash")
    if modhash:
        return Login(name=user, cookie=session_cookie(response), modhash=modhash)

    errors = list(body.get("errors") or []) or [UNKNOWN_LOGIN_ERROR]
    logger.warning("login_failed", extra={"user": user, "errors": errors})
    return Login(name=user, errors=errors)


def classify_reply(body: str) -> ReplyResult:
    """Map a comment-post response body to a ReplyResult."""
    for pattern, status in _REPLY_PATTERNS:
        if pattern.search(body):
            return ReplyResult(status=status, body=body)
    return ReplyResult(status=ReplyStatus.UNKNOWN, body=body)
