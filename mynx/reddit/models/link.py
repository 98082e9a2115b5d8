"""Link (submission) data model."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Literal

from pydantic import Field

from ..core.enums import EntityKind
from .thing import Thing

_X_POST_RE = re.compile(r"(?i)x-?post|cross-?post")


class Link(Thing):
    """A link or self post (raw kind ``t3``).

    Reddit's ``selftext`` is exposed as ``body``; ``permalink`` is absolute.
    ``replies`` is empty unless the link was loaded from its comments page.
    """

    kind: Literal[EntityKind.LINK] = EntityKind.LINK
    permalink: str
    time: datetime
    body: str | None = None
    title: str | None = None
    author: str | None = None
    replies: list[Thing] = Field(default_factory=list)

    @property
    def is_x_post(self) -> bool:
        """True if the title marks the link as a cross-post."""
        return bool(self.title and _X_POST_RE.search(self.title))
