"""
Terrain — Analysis Cache

Caller-side memoization of market-sizing results. The engine is
deterministic, so returning a stored result for an identical input is
transparent to the client.

Keys are "analysis:{feature}:{sha256 of canonical input JSON}", where the
canonical form sorts keys and drops unset optional fields. Entries expire
after a TTL; when full, the oldest entry is evicted.
"""

import hashlib
import json
import logging
import threading
import time
from collections import OrderedDict
from typing import Any, Optional

from pydantic import BaseModel

logger = logging.getLogger("terrain.cache")


def stable_hash(payload: Any) -> str:
    if isinstance(payload, BaseModel):
        payload = payload.model_dump(mode="json", exclude_none=True)
    canonical = json.dumps(payload, sort_keys=True, separators=(",", ":"), default=str)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


def cache_key(feature: str, payload: Any) -> str:
    return f"analysis:{feature}:{stable_hash(payload)}"


class AnalysisCache:
    """Thread-safe TTL cache shared by the API worker threads."""

    def __init__(self, ttl_seconds: float = 900, max_entries: int = 256, clock=time.monotonic):
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self._clock = clock
        self._entries: "OrderedDict[str, tuple]" = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            expires_at, value = entry
            if self._clock() >= expires_at:
                del self._entries[key]
                return None
            logger.info(f"cache_hit {key}")
            return value

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._entries[key] = (self._clock() + self.ttl_seconds, value)
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_entries:
                self._entries.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
