"""Process-wide request spacing.

Reddit expects API clients to keep a fixed gap between requests. A
RequestThrottle is a shared gate: every request that goes through the same
instance starts at least ``interval_ms`` after the previous one started, no
matter how many streams are pulling concurrently. Waiters are served in
arrival order because ``asyncio.Lock`` hands itself to the oldest waiter.

The throttle only spaces calls. It never caches, retries or inspects
responses.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from ..config import DEFAULT_THROTTLE_INTERVAL_MS

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RequestThrottle:
    """Serializing gate enforcing a minimum interval between call starts."""

    def __init__(
        self,
        interval_ms: int = DEFAULT_THROTTLE_INTERVAL_MS,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        """Initialize throttle.

        Args:
            interval_ms: Minimum gap between the starts of two calls
            clock: Monotonic clock in seconds (injectable for tests)
            sleep: Async sleep used to back off (injectable for tests)
        """
        if interval_ms < 0:
            raise ValueError("interval_ms must be >= 0")
        self._interval = interval_ms / 1000.0
        self._clock = clock
        self._sleep = sleep
        self._last_start: float | None = None
        self._lock: asyncio.Lock | None = None
        self._lock_loop: asyncio.AbstractEventLoop | None = None

    @property
    def interval_ms(self) -> int:
        return int(round(self._interval * 1000))

    def set_interval(self, interval_ms: int) -> None:
        """Change the interval; applies from the next call on."""
        if interval_ms < 0:
            raise ValueError("interval_ms must be >= 0")
        self._interval = interval_ms / 1000.0

    def _get_lock(self) -> asyncio.Lock:
        # asyncio.Lock binds to the loop it first waits on; the shared default
        # instance may outlive one loop (e.g. successive asyncio.run calls).
        loop = asyncio.get_running_loop()
        if self._lock is None or self._lock_loop is not loop:
            self._lock = asyncio.Lock()
            self._lock_loop = loop
        return self._lock

    async def acquire(self) -> float:
        """Wait for this caller's turn and claim the current start slot.

        Returns:
            Seconds spent backing off (0.0 if no wait was needed)
        """
        async with self._get_lock():
            now = self._clock()
            waited = 0.0
            if self._last_start is not None:
                remaining = self._interval - (now - self._last_start)
                if remaining > 0:
                    logger.debug("request_throttled", extra={"wait_ms": remaining * 1000.0})
                    await self._sleep(remaining)
                    waited = remaining
                    now = self._clock()
            self._last_start = now
            return waited

    async def call(self, fn: Callable[..., Awaitable[T]], *args: Any, **kwargs: Any) -> T:
        """Run ``fn(*args, **kwargs)`` once the interval since the last start has passed."""
        await self.acquire()
        return await fn(*args, **kwargs)

    def reset(self) -> None:
        """Forget the last call start so the next call proceeds immediately."""
        self._last_start = None


_default_throttle: RequestThrottle | None = None


def get_default_throttle() -> RequestThrottle:
    """Get the process-wide throttle singleton.

    Transports use it unless given their own instance, so every client in
    the process shares one request budget. Created on first access.
    """
    global _default_throttle
    if _default_throttle is None:
        _default_throttle = RequestThrottle()
    return _default_throttle


def configure_default_throttle(interval_ms: int) -> RequestThrottle:
    """Set the interval of the process-wide throttle and return it."""
    throttle = get_default_throttle()
    throttle.set_interval(interval_ms)
    return throttle
