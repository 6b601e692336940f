"""
Cache of remote transliteration results.

Only successful service responses are stored. Entries expire after a TTL and
the least recently read entry is evicted once `max_size` is reached, so a
busy instance keeps answering repeated phrases without a network call.
"""
import time
import threading
import hashlib
from collections import OrderedDict
from typing import Callable, Dict, Optional, Tuple


class LRUCache:
    def __init__(self, max_size: int = 5000, default_ttl: int = 600, clock: Callable[[], float] = time.monotonic):
        self.max_size = max_size
        self.default_ttl = default_ttl
        self.clock = clock
        self._lock = threading.RLock()
        self._store: "OrderedDict[str, Tuple[float, str]]" = OrderedDict()
        self.cache_hits = 0
        self.cache_misses = 0

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            item = self._store.get(key)
            if item is not None and item[0] < self.clock():
                del self._store[key]
                item = None
            if item is None:
                self.cache_misses += 1
                return None
            self._store.move_to_end(key)
            self.cache_hits += 1
            return item[1]

    def set(self, key: str, output: str, ttl: Optional[int] = None) -> None:
        if self.max_size <= 0:
            return
        expiry = self.clock() + (ttl or self.default_ttl)
        with self._lock:
            self._store[key] = (expiry, output)
            self._store.move_to_end(key)
            while len(self._store) > self.max_size:
                self._store.popitem(last=False)

    def stats(self) -> Dict[str, int]:
        with self._lock:
            return {"size": len(self._store), "hits": self.cache_hits, "misses": self.cache_misses}


def remote_result_key(source: str, target: str, text: str) -> str:
    """Key for a conversion between two remote script names."""
    raw = "\x00".join((source, target, text))
    return hashlib.sha256(raw.encode("utf-8")).hexdigest()
