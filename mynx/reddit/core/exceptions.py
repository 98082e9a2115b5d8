"""Custom exception hierarchy."""

from __future__ import annotations


class RedditError(Exception):
    """Base exception for all library errors."""

    pass


class APIError(RedditError):
    """Error from the remote API or the transport underneath it.

    ``status_code`` is None when the request never produced a response
    (connection refused, timeout, DNS failure).
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class RateLimitError(APIError):
    """Reddit answered 429 Too Many Requests."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message, status_code=429, url=url)


class ForbiddenError(APIError):
    """Reddit answered 403 Forbidden."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message, status_code=403, url=url)


class DecodeError(RedditError):
    """A recognized object could not be turned into its entity."""

    def __init__(self, message: str, kind: str | None = None) -> None:
        super().__init__(message)
        self.kind = kind


class PaginationError(RedditError):
    """A listing page cannot be continued (no cursor on its last item)."""

    pass


class ValidationError(RedditError):
    """Invalid caller input."""

    pass
