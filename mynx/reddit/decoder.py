"""Decoding of reddit's tagged JSON into entities.

Reddit wraps every object as ``{"kind": <tag>, "data": {...}}``. ``decode``
walks any parsed JSON value and replaces each tagged object it recognizes with
its entity:

- JSON arrays decode element-wise, order preserved.
- Scalars and null pass through unchanged.
- ``Listing`` envelopes unwrap to the list of their decoded children.
- ``t1``/``t2``/``t3``/``more`` become Comment/Account/Link/MoreMarker.

Unrecognized objects are logged and decode to None; they never raise, so one
odd child does not spoil the rest of a page.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from .config import BASE_URL
from .core.enums import EntityKind
from .core.exceptions import DecodeError
from .models import Account, Comment, Link, MoreMarker, Thing

logger = logging.getLogger(__name__)

_SCALARS = (str, int, float, bool)


def decode(node: Any, *, base_url: str = BASE_URL) -> Any:
    """Decode a parsed JSON value.

    Args:
        node: Value produced by ``json.loads`` (or aiohttp's ``json()``)
        base_url: Site root used to build absolute permalinks

    Returns:
        An entity, a list of decoded values, the unchanged scalar, or None
        for an unrecognized object

    Raises:
        DecodeError: If a recognized object lacks what its entity needs
    """
    if isinstance(node, list):
        return [decode(item, base_url=base_url) for item in node]
    if node is None or isinstance(node, _SCALARS):
        return node
    if not isinstance(node, dict):
        return _unrecognized(node)

    kind = node.get("kind")
    handler = _DECODERS.get(kind) if isinstance(kind, str) else None
    if handler is None:
        return _unrecognized(node)

    data = node.get("data")
    if not isinstance(data, dict):
        raise DecodeError(f"{kind!r} object has no data mapping", kind=kind)
    try:
        return handler(data, base_url)
    except PydanticValidationError as exc:
        raise DecodeError(f"Invalid {kind!r} object: {exc}", kind=kind) from exc


def trim_id(full_name: str) -> str:
    """Strip the type prefix from a fullname: ``'t3_xvzdh'`` -> ``'xvzdh'``."""
    _, sep, rest = full_name.partition("_")
    if not sep or not rest:
        raise DecodeError(f"Not a prefixed id: {full_name!r}")
    return rest


def secs_to_datetime(seconds: float | int | str) -> datetime:
    """Convert epoch seconds (reddit's ``created_utc``) to an aware datetime."""
    return datetime.fromtimestamp(float(seconds), tz=UTC)


def comment_permalink(data: dict[str, Any], base_url: str = BASE_URL) -> str:
    return (
        f"{base_url.rstrip('/')}/r/{data['subreddit']}/comments/"
        f"{trim_id(data['link_id'])}/_/{data['id']}"
    )


def _unrecognized(node: Any) -> None:
    kind = node.get("kind") if isinstance(node, dict) else type(node).__name__
    logger.warning("decode_unrecognized_kind", extra={"kind": kind, "node": node})
    return None


def _require(data: dict[str, Any], *fields: str, kind: str) -> None:
    missing = [f for f in fields if data.get(f) is None]
    if missing:
        raise DecodeError(f"{kind!r} object missing {', '.join(missing)}", kind=kind)


def _decode_listing(data: dict[str, Any], base_url: str) -> list[Any]:
    children = data.get("children") or []
    decoded = decode(children, base_url=base_url)
    return [item for item in decoded if item is not None]


def _decode_comment(data: dict[str, Any], base_url: str) -> Comment:
    _require(data, "subreddit", "link_id", "id", "created_utc", kind="t1")
    replies = decode(data.get("replies"), base_url=base_url)
    return Comment(
        **{
            **data,
            "kind": EntityKind.COMMENT,
            "permalink": comment_permalink(data, base_url),
            "time": secs_to_datetime(data["created_utc"]),
            "replies": replies if isinstance(replies, list) else [],
            "score": int(data.get("ups") or 0) - int(data.get("downs") or 0),
        }
    )


def _decode_account(data: dict[str, Any], base_url: str) -> Account:
    fields = {k: v for k, v in data.items() if k != "modhash"}
    return Account(**{**fields, "kind": EntityKind.ACCOUNT})


def _decode_link(data: dict[str, Any], base_url: str) -> Link:
    _require(data, "permalink", "created_utc", kind="t3")
    fields = {k: v for k, v in data.items() if k != "selftext"}
    return Link(
        **{
            **fields,
            "kind": EntityKind.LINK,
            "permalink": base_url.rstrip("/") + data["permalink"],
            "time": secs_to_datetime(data["created_utc"]),
            "body": data.get("selftext"),
        }
    )


def _decode_more(data: dict[str, Any], base_url: str) -> MoreMarker:
    return MoreMarker(**{**data, "kind": EntityKind.MORE})


_DECODERS: dict[str, Callable[[dict[str, Any], str], Thing | list[Any]]] = {
    "Listing": _decode_listing,
    "t1": _decode_comment,
    "t2": _decode_account,
    "t3": _decode_link,
    "more": _decode_more,
}
