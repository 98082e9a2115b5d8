"""Time-bounded memoization for async fetch functions.

A TTLCache wraps an async function and remembers its results per argument
tuple for a fixed time. Expired entries are dropped lazily: every call first
sweeps the map, then serves a live entry or calls through and stores the new
result. Nothing is invalidated except by age.

Keys are structural: dicts, lists and pydantic models in the arguments are
frozen into hashable equivalents, so two calls with equal query dicts share
an entry.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable, Hashable
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from ..config import DEFAULT_CACHE_TTL_MS

logger = logging.getLogger(__name__)

T = TypeVar("T")


def freeze(value: Any) -> Hashable:
    """Turn a (possibly nested) argument into a hashable cache key part."""
    if isinstance(value, dict):
        return tuple(sorted((str(k), freeze(v)) for k, v in value.items()))
    if isinstance(value, (list, tuple)):
        return tuple(freeze(v) for v in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(freeze(v) for v in value)
    if isinstance(value, BaseModel):
        return (type(value).__name__, freeze(value.model_dump()))
    try:
        hash(value)
    except TypeError:
        return repr(value)
    return value


def make_key(args: tuple[Any, ...], kwargs: dict[str, Any]) -> Hashable:
    return (freeze(args), freeze(kwargs))


class TTLCache(Generic[T]):
    """Async memoizer whose entries expire ``ttl_ms`` after insertion."""

    def __init__(
        self,
        fn: Callable[..., Awaitable[T]],
        ttl_ms: int = DEFAULT_CACHE_TTL_MS,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl_ms <= 0:
            raise ValueError("ttl_ms must be > 0")
        self._fn = fn
        self._ttl = ttl_ms / 1000.0
        self._clock = clock
        self._entries: dict[Hashable, tuple[T, float]] = {}
        self._lock = asyncio.Lock()

    @property
    def wrapped(self) -> Callable[..., Awaitable[T]]:
        """The function this cache calls through to."""
        return self._fn

    @property
    def ttl_ms(self) -> int:
        return int(round(self._ttl * 1000))

    def __len__(self) -> int:
        return len(self._entries)

    async def __call__(self, *args: Any, **kwargs: Any) -> T:
        key = make_key(args, kwargs)
        async with self._lock:
            self._sweep(self._clock())
            entry = self._entries.get(key)
            if entry is not None:
                logger.debug("cache_hit", extra={"entries": len(self._entries)})
                return entry[0]

        logger.debug("cache_miss", extra={"entries": len(self._entries)})
        result = await self._fn(*args, **kwargs)

        async with self._lock:
            self._entries[key] = (result, self._clock())
        return result

    def _sweep(self, now: float) -> None:
        expired = [k for k, (_, stored) in self._entries.items() if now - stored > self._ttl]
        for key in expired:
            del self._entries[key]
        if expired:
            logger.debug(
                "cache_expired",
                extra={"expired": len(expired), "entries": len(self._entries)},
            )

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()


def memoize_with_ttl(
    fn: Callable[..., Awaitable[T]],
    ttl_ms: int = DEFAULT_CACHE_TTL_MS,
    **kwargs: Any,
) -> TTLCache[T]:
    """Like ``functools.cache`` for coroutines, except results expire after ``ttl_ms``."""
    return TTLCache(fn, ttl_ms, **kwargs)
