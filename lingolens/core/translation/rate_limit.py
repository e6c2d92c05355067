"""
Outbound rate-limit policies for sequential gateway calls.

The orchestrator awaits `policy.wait()` between two consecutive gateway
calls. Swapping the policy changes pacing without touching the
orchestrator's chunk handling.
"""

import asyncio
import time
from abc import ABC, abstractmethod
from typing import Optional

from lingolens.config import TRANSLATION_DELAY_SECONDS


class RateLimitPolicy(ABC):
    """Pacing applied between consecutive gateway calls."""

    @abstractmethod
    async def wait(self) -> None:
        pass


class FixedDelayPolicy(RateLimitPolicy):
    """Sleep a fixed interval between calls."""

    def __init__(self, delay_seconds: float = TRANSLATION_DELAY_SECONDS):
        if delay_seconds < 0:
            raise ValueError("delay_seconds must be >= 0")
        self.delay_seconds = delay_seconds

    async def wait(self) -> None:
        await asyncio.sleep(self.delay_seconds)

    def __repr__(self) -> str:
        return f"FixedDelayPolicy(delay_seconds={self.delay_seconds})"


class TokenBucketPolicy(RateLimitPolicy):
    """Allow short bursts up to `capacity` calls, refilled at `rate` calls/second."""

    def __init__(self, rate: float, capacity: int = 1):
        if rate <= 0:
            raise ValueError("rate must be > 0")
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self.rate = rate
        self.capacity = capacity
        self._tokens = float(capacity)
        self._last_refill: Optional[float] = None

    def _refill(self) -> None:
        now = time.monotonic()
        if self._last_refill is not None:
            elapsed = now - self._last_refill
            self._tokens = min(self.capacity, self._tokens + elapsed * self.rate)
        self._last_refill = now

    async def wait(self) -> None:
        self._refill()
        if self._tokens < 1:
            await asyncio.sleep((1 - self._tokens) / self.rate)
            self._refill()
        self._tokens -= 1

    def __repr__(self) -> str:
        return f"TokenBucketPolicy(rate={self.rate}, capacity={self.capacity})"


class NoDelayPolicy(RateLimitPolicy):
    """No pacing."""

    async def wait(self) -> None:
        return None
