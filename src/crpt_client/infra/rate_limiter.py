from __future__ import annotations

import logging
import math
import threading
import time
from collections import deque
from typing import Optional

from ..core.domain.enums import TimeUnit
from ..core.errors import ControllerClosed, InvalidConfiguration
from ..core.ports.rate_limiter_port import RateLimiterPort

logger = logging.getLogger(__name__)


class FixedWindowRateLimiter(RateLimiterPort):
    """Fixed window rate limiter: at most ``capacity`` permits per window.

    A background ticker restores the full capacity every ``window_seconds``,
    starting one full window after construction. Callers that find no permits
    left block until the next reset and are admitted in arrival order.

    Permits are never released by callers; only the ticker replenishes them.

    Example:
        # 5 requests per minute
        limiter = FixedWindowRateLimiter.per(TimeUnit.MINUTES, 5)
        limiter.acquire()
        ...
        limiter.close()

        # Or as a context manager
        with FixedWindowRateLimiter(window_seconds=1.0, capacity=10) as limiter:
            limiter.acquire()
    """

    def __init__(self, window_seconds: float, capacity: int) -> None:
        """Initialize the limiter and start its reset ticker.

        Args:
            window_seconds: Length of one window in seconds. Must be positive.
            capacity: Permits available per window. Must be a positive int.

        Raises:
            InvalidConfiguration: If either argument is not positive.
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise InvalidConfiguration(f"Request limit must be a positive integer, got {capacity!r}")
        try:
            window = float(window_seconds)
        except (TypeError, ValueError):
            raise InvalidConfiguration(f"Window duration must be a number, got {window_seconds!r}") from None
        if not math.isfinite(window) or window <= 0:
            raise InvalidConfiguration(f"Window duration must be positive and finite, got {window_seconds!r}")

        self._capacity = capacity
        self._window = window
        self._cond = threading.Condition(threading.Lock())
        self._remaining = capacity
        self._waiters: deque[object] = deque()
        self._closed = False
        self._stop = threading.Event()
        self._next_reset_at = time.monotonic() + self._window

        self._ticker = threading.Thread(
            target=self._run_ticker,
            name=f"fixed-window-reset-{capacity}/{self._window:g}s",
            daemon=True,
        )
        self._ticker.start()
        logger.debug("Rate limiter started: %d permits per %.3fs", capacity, self._window)

    @classmethod
    def per(cls, unit: TimeUnit, capacity: int) -> FixedWindowRateLimiter:
        """Build a limiter allowing ``capacity`` permits per one ``unit``."""
        return cls(window_seconds=unit.seconds, capacity=capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def window_seconds(self) -> float:
        return self._window

    @property
    def remaining(self) -> int:
        with self._cond:
            return self._remaining

    @property
    def next_reset_at(self) -> float:
        """time.monotonic() value at which the next reset is due."""
        with self._cond:
            return self._next_reset_at

    @property
    def closed(self) -> bool:
        with self._cond:
            return self._closed

    def acquire(self, timeout: Optional[float] = None) -> bool:
        """Consume one permit, blocking until the next reset if none are left.

        Args:
            timeout: Maximum seconds to wait. None waits indefinitely.

        Returns:
            True once a permit is consumed, False if the timeout expired first.

        Raises:
            ControllerClosed: If the limiter has been closed.
        """
        with self._cond:
            if self._closed:
                raise ControllerClosed("Rate limiter is closed")
            if self._remaining > 0 and not self._waiters:
                self._remaining -= 1
                return True

            ticket = object()
            self._waiters.append(ticket)
            logger.debug("No permits left; waiting for window reset (%d queued)", len(self._waiters))
            try:
                admitted = self._cond.wait_for(
                    lambda: self._remaining > 0 and self._waiters[0] is ticket,
                    timeout,
                )
                if not admitted:
                    logger.debug("Gave up waiting for a permit after %.3fs", timeout)
                    return False
                self._remaining -= 1
                return True
            finally:
                self._waiters.remove(ticket)
                # Let the new head of the queue re-check.
                self._cond.notify_all()

    def close(self) -> None:
        """Stop the reset ticker. Idempotent.

        Callers already blocked in acquire() are left waiting.
        """
        with self._cond:
            if self._closed:
                return
            self._closed = True
        self._stop.set()
        if threading.current_thread() is not self._ticker:
            self._ticker.join()
        logger.debug("Rate limiter closed")

    def _reset(self) -> None:
        with self._cond:
            # Read-and-restore in one locked step; remaining stays within [0, capacity].
            self._remaining = self._capacity
            self._cond.notify_all()
        logger.debug("Window reset: %d permits available", self._capacity)

    def _run_ticker(self) -> None:
        next_at = self._next_reset_at
        while True:
            delay = next_at - time.monotonic()
            if self._stop.wait(max(0.0, delay)):
                return
            self._reset()
            # Fixed rate; skip windows missed while the process was suspended.
            now = time.monotonic()
            next_at += self._window
            while next_at <= now:
                next_at += self._window
            with self._cond:
                self._next_reset_at = next_at

    def __enter__(self) -> FixedWindowRateLimiter:
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
