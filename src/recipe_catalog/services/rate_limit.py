"""Slow-down rate limiting for mutation requests."""

import time
from collections.abc import Callable
from dataclasses import dataclass, field


@dataclass
class _Window:
    count: int
    resets_at: float


@dataclass
class SpeedLimiter:
    """Delays, but never rejects, clients that exceed a request budget.

    Each client gets a fixed window. The first ``delay_after`` requests in a
    window pass without delay; every request after that waits ``delay_ms``
    longer than the one before it.
    """

    window_seconds: float = 15 * 60
    delay_after: int = 100
    delay_ms: int = 500
    clock: Callable[[], float] = time.monotonic
    _windows: dict[str, _Window] = field(default_factory=dict, repr=False)

    def hit(self, key: str) -> float:
        """Record a request for key and return the delay in seconds."""
        now = self.clock()
        window = self._windows.get(key)
        if window is None or now >= window.resets_at:
            self._prune(now)
            window = _Window(count=0, resets_at=now + self.window_seconds)
            self._windows[key] = window
        window.count += 1
        excess = window.count - self.delay_after
        if excess <= 0:
            return 0.0
        return excess * self.delay_ms / 1000

    def _prune(self, now: float) -> None:
        expired = [
            key for key, window in self._windows.items() if now >= window.resets_at
        ]
        for key in expired:
            self._windows.pop(key, None)
