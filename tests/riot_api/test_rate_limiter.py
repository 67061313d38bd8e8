"""
Tests for the minimum-interval rate limiter.
"""

import asyncio
import time

import pytest

from team_balancer.core.riot_api.rate_limiter import RateLimiter


class FakeTime:
    """Clock plus sleep that advances the clock instead of waiting."""

    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def clock(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class TestRateLimiter:
    """Test cases for RateLimiter."""

    def test_initialization(self):
        """Test rate limiter initialization."""
        limiter = RateLimiter(min_interval=0.07)
        assert limiter.min_interval == 0.07
        assert limiter.last_request_time is None

    @pytest.mark.asyncio
    async def test_first_call_is_not_delayed(self):
        """The very first call starts immediately."""
        fake = FakeTime()
        limiter = RateLimiter(min_interval=1.0, clock=fake.clock, sleep=fake.sleep)

        await limiter.wait()

        assert fake.sleeps == []
        assert limiter.last_request_time == 0.0

    @pytest.mark.asyncio
    async def test_consecutive_starts_are_spaced(self):
        """Starts of N scheduled calls are at least min_interval apart."""
        fake = FakeTime()
        limiter = RateLimiter(min_interval=0.5, clock=fake.clock, sleep=fake.sleep)
        starts = []

        async def producer():
            starts.append(fake.clock())
            return len(starts)

        results = await asyncio.gather(*(limiter.schedule(producer) for _ in range(5)))

        assert results == [1, 2, 3, 4, 5]
        assert starts == pytest.approx([0.0, 0.5, 1.0, 1.5, 2.0])

    @pytest.mark.asyncio
    async def test_no_wait_when_interval_already_elapsed(self):
        """A call arriving after the interval is not delayed."""
        fake = FakeTime()
        limiter = RateLimiter(min_interval=0.5, clock=fake.clock, sleep=fake.sleep)

        await limiter.wait()
        fake.now += 2.0
        await limiter.wait()

        assert fake.sleeps == []

    @pytest.mark.asyncio
    async def test_partial_wait(self):
        """Only the remainder of the interval is waited."""
        fake = FakeTime()
        limiter = RateLimiter(min_interval=1.0, clock=fake.clock, sleep=fake.sleep)

        await limiter.wait()
        fake.now += 0.25
        await limiter.wait()

        assert fake.sleeps == [pytest.approx(0.75)]

    @pytest.mark.asyncio
    async def test_real_time_spacing_and_order(self):
        """With a real clock, calls start in submission order and are spaced."""
        limiter = RateLimiter(min_interval=0.05)
        starts = []

        def make_producer(index):
            async def producer():
                starts.append((index, time.monotonic()))
                return index

            return producer

        await asyncio.gather(*(limiter.schedule(make_producer(i)) for i in range(4)))

        assert [index for index, _ in starts] == [0, 1, 2, 3]
        gaps = [b - a for (_, a), (_, b) in zip(starts, starts[1:])]
        assert all(gap >= 0.05 - 0.005 for gap in gaps)

    @pytest.mark.asyncio
    async def test_stuck_call_does_not_block_next_call(self):
        """A call that never finishes only delays its own caller."""
        limiter = RateLimiter(min_interval=0.01)
        release = asyncio.Event()

        async def stuck():
            await release.wait()
            return "stuck"

        async def quick():
            return "quick"

        stuck_task = asyncio.create_task(limiter.schedule(stuck))
        await asyncio.sleep(0)
        result = await asyncio.wait_for(limiter.schedule(quick), timeout=1.0)

        assert result == "quick"
        assert not stuck_task.done()

        release.set()
        assert await stuck_task == "stuck"

    @pytest.mark.asyncio
    async def test_producer_errors_propagate(self):
        """Failures inside the scheduled call reach the caller."""
        limiter = RateLimiter(min_interval=0)

        async def failing():
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            await limiter.schedule(failing)
