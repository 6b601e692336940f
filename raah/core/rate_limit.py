import time
from collections import deque
from typing import Callable, Deque, Dict


class RateLimiter:
    """Sliding-window limiter; `max_per_minute <= 0` allows everything.

    Buckets that hold no request inside the window are dropped, so the number
    of tracked keys is bounded by the clients seen in the last two windows.
    """

    def __init__(self, max_per_minute: int = 60, clock: Callable[[], float] = time.monotonic):
        self.max = max_per_minute
        self.window = 60
        self.clock = clock
        self.buckets: Dict[str, Deque[float]] = {}
        self._last_sweep = clock()

    def _prune(self, bucket: Deque[float], now: float) -> None:
        while bucket and now - bucket[0] >= self.window:
            bucket.popleft()

    def _sweep(self, now: float) -> None:
        if now - self._last_sweep < self.window:
            return
        self._last_sweep = now
        for key in list(self.buckets):
            bucket = self.buckets[key]
            self._prune(bucket, now)
            if not bucket:
                del self.buckets[key]

    def allow(self, key: str) -> bool:
        if self.max <= 0:
            return True
        now = self.clock()
        self._sweep(now)
        bucket = self.buckets.setdefault(key, deque())
        self._prune(bucket, now)
        if len(bucket) >= self.max:
            return False
        bucket.append(now)
        return True

    def retry_after(self, key: str) -> int:
        """Seconds until `key` frees a slot."""
        bucket = self.buckets.get(key)
        if not bucket:
            return 0
        now = self.clock()
        self._prune(bucket, now)
        if len(bucket) < self.max:
            return 0
        return max(1, int(self.window - (now - bucket[0]) + 0.999))
