"""Sliding-window rate limiter for free web APIs."""

import threading
import time
from collections import deque
from typing import Callable


class RateLimiter:
    """Allow at most ``max_requests`` calls per ``window`` seconds.

    Shared by every request a lookup makes, so one lookup that needs
    several API calls counts each of them.
    """

    def __init__(
        self,
        max_requests: int = 60,
        window: float = 60.0,
        time_source: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """Initialize the limiter.

        Args:
            max_requests: Requests allowed per window
            window: Window length in seconds
            time_source: Monotonic clock
            sleep: Function used to wait for a free slot
        """
        self._max_requests = max(1, max_requests)
        self._window = window
        self._time_source = time_source
        self._sleep = sleep
        self._timestamps: deque[float] = deque()
        self._lock = threading.Lock()

    def acquire(self) -> None:
        """Block until a request slot is free, then take it."""
        while True:
            with self._lock:
                now = self._time_source()
                while self._timestamps and now - self._timestamps[0] >= self._window:
                    self._timestamps.popleft()

                if len(self._timestamps) < self._max_requests:
                    self._timestamps.append(now)
                    return

                delay = self._window - (now - self._timestamps[0])

            if delay > 0:
                self._sleep(delay)

    @property
    def in_window(self) -> int:
        """Number of requests counted in the current window."""
        with self._lock:
            return len(self._timestamps)
