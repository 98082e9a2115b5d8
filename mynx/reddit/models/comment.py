"""Comment data model."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field

from ..core.enums import EntityKind
from .thing import Thing

DELETED_BODY = "[deleted]"


class Comment(Thing):
    """A comment (raw kind ``t1``).

    ``score`` is derived as ``ups - downs``; ``replies`` holds the decoded
    reply tree (comments and ``more`` markers).
    """

    kind: Literal[EntityKind.COMMENT] = EntityKind.COMMENT
    permalink: str
    time: datetime
    score: int
    replies: list[Thing] = Field(default_factory=list)
    body: str | None = None
    author: str | None = None

    @property
    def is_deleted(self) -> bool:
        """True if the comment body is gone."""
        return self.body is None or self.body == DELETED_BODY
