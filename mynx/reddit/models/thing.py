"""Base model shared by every decoded reddit object."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from ..core.enums import EntityKind


class Thing(BaseModel):
    """A decoded reddit object.

    Every field reddit sent is kept: declared fields are typed, everything
    else is reachable as an attribute through pydantic's extra storage
    (``comment.subreddit``, ``link.num_comments``). Instances are frozen;
    use ``model_copy(update=...)`` to derive a changed entity.
    """

    kind: EntityKind
    id: str | None = None
    name: str | None = None

    model_config = ConfigDict(frozen=True, extra="allow")

    @property
    def is_comment(self) -> bool:
        return self.kind == EntityKind.COMMENT

    @property
    def is_link(self) -> bool:
        return self.kind == EntityKind.LINK

    def is_authored_by(self, user: str) -> bool:
        """True if the object was authored by the given username."""
        return self.get("author") == user

    def get(self, field: str, default: Any = None) -> Any:
        """Look up a declared or passthrough field by name."""
        if field in type(self).model_fields:
            return getattr(self, field)
        return (self.model_extra or {}).get(field, default)
