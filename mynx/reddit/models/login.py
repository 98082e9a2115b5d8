"""Login credential and action result models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import ReplyStatus


class Login(BaseModel):
    """Outcome of a login attempt.

    A rejected login is still a Login: ``succeeded`` is False and ``errors``
    carries what reddit reported. Check ``succeeded`` (or use
    ``login_success``) before passing it to requests.
    """

    name: str
    cookie: str | None = None
    modhash: str | None = None
    errors: list[Any] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def succeeded(self) -> bool:
        return bool(self.modhash)

    def headers(self) -> dict[str, str]:
        """Request headers authenticating as this login."""
        if not self.succeeded:
            return {}
        headers = {"X-Modhash": self.modhash or ""}
        if self.cookie:
            headers["Cookie"] = self.cookie
        return headers


def login_success(login: Login | None) -> Login | None:
    """Return the login if it succeeded, otherwise None."""
    if login is not None and login.succeeded:
        return login
    return None


class ReplyResult(BaseModel):
    """Classified outcome of posting a reply."""

    status: ReplyStatus
    body: str = ""

    model_config = ConfigDict(frozen=True)

    @property
    def submitted(self) -> bool:
        return self.status == ReplyStatus.SUBMITTED
