"""Request spacing for outbound Riot API calls."""

import asyncio
import time
from typing import Awaitable, Callable, Optional, TypeVar
import structlog

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class RateLimiter:
    """
    Process-wide minimum-interval scheduler.

    Every outbound call waits here before it starts. Calls are released in
    the order they arrived (``asyncio.Lock`` wakes waiters FIFO) and never
    closer together than ``min_interval`` seconds, measured start to start.
    There is no burst allowance. The call itself runs after the lock is
    released, so a slow response only holds up its own caller.
    """

    def __init__(
        self,
        min_interval: float = 0.07,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """
        Initialize rate limiter.

        Args:
            min_interval: Minimum seconds between the start of two calls
            clock: Monotonic time source
            sleep: Coroutine used to wait
        """
        self.min_interval = min_interval
        self.last_request_time: Optional[float] = None
        self.lock = asyncio.Lock()
        self._clock = clock
        self._sleep = sleep

    async def wait(self) -> None:
        """Block until the next call slot is free, then claim it."""
        async with self.lock:
            if self.last_request_time is not None:
                time_since_last = self._clock() - self.last_request_time
                if time_since_last < self.min_interval:
                    delay = self.min_interval - time_since_last
                    logger.debug("Spacing upstream request", delay=delay)
                    await self._sleep(delay)

            self.last_request_time = self._clock()

    async def schedule(self, producer: Callable[[], Awaitable[T]]) -> T:
        """Run ``producer`` once its slot comes up and return its result."""
        await self.wait()
        return await producer()
