"""Placeholder for replies left out of a page."""

from typing import Literal

from pydantic import Field

from ..core.enums import EntityKind
from .thing import Thing


class MoreMarker(Thing):
    """Reddit's ``more`` object.

    Marks replies that were not included in the response; ``children`` lists
    their ids so a caller may fetch them separately.
    """

    kind: Literal[EntityKind.MORE] = EntityKind.MORE
    children: list[str] = Field(default_factory=list)
    count: int = 0
