import time
from collections import OrderedDict
from collections.abc import Callable
from threading import Lock
from typing import Any

from nodechain.application.port import Cache


class TTLCache(Cache):
    """Bounded in-memory cache with expire-after-write entries.

    When full, the least recently used entry is evicted. Safe to share between
    concurrent workflow runs.
    """

    def __init__(self, max_size: int = 100, ttl_seconds: float = 600.0, clock: Callable[[], float] = time.monotonic):
        if max_size <= 0:
            raise ValueError("max_size must be positive")
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self.max_size = max_size
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: OrderedDict[str, tuple[float, Any]] = OrderedDict()
        self._lock = Lock()

    def get(self, key: str) -> Any | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            written_at, value = entry
            if self._clock() - written_at >= self.ttl_seconds:
                del self._entries[key]
                return None
            self._entries.move_to_end(key)
            return value

    def put(self, key: str, value: Any) -> None:
        with self._lock:
            self._entries[key] = (self._clock(), value)
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_size:
                self._entries.popitem(last=False)

    def invalidate(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
