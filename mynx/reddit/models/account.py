"""Account data model."""

from typing import Literal

from ..core.enums import EntityKind
from .thing import Thing


class Account(Thing):
    """A user account (raw kind ``t2``). The session modhash is never kept."""

    kind: Literal[EntityKind.ACCOUNT] = EntityKind.ACCOUNT
