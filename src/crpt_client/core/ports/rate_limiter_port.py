from __future__ import annotations

from typing import Protocol


class RateLimiterPort(Protocol):
    def acquire(self) -> None:
        """Block until a permit is available according to the configured rate."""

    def close(self) -> None:
        """Stop replenishing permits. Further acquire() calls fail."""
