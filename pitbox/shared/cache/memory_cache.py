# -*- coding: utf-8 -*-
"""
pitbox/shared/cache/memory_cache.py

Caché en memoria con TTL y LRU eviction (L1 por proceso).

Política de TTL:
- ttl=None en set(): usa default_ttl (None = no expira)
- ttl<=0: la entrada NO se almacena

Autor: PitBox
Fecha: 2026-09-17
"""

from __future__ import annotations

import logging
import threading
import time
from collections import OrderedDict
from typing import Any, Callable, Optional

from .cache_backend import CacheBackend

logger = logging.getLogger(__name__)


class MemoryCache(CacheBackend):
    """Caché thread-safe con TTL y LRU eviction."""

    def __init__(
        self,
        max_size: Optional[int] = 512,
        default_ttl: Optional[int] = 300,
        name: str = "memory",
        clock: Callable[[], float] = time.monotonic,
    ):
        self._max_size = max_size
        self._default_ttl = default_ttl
        self.name = name
        self._clock = clock

        self._cache: OrderedDict[str, tuple[Any, Optional[float]]] = OrderedDict()
        self._lock = threading.RLock()

        self._hits = 0
        self._misses = 0
        self._evictions = 0
        self._invalidations = 0
        self._expired_removals = 0

    @property
    def max_size(self) -> Optional[int]:
        return self._max_size

    @property
    def default_ttl(self) -> Optional[int]:
        return self._default_ttl

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            if key not in self._cache:
                self._misses += 1
                return None

            value, expiry = self._cache[key]
            if expiry is not None and expiry <= self._clock():
                del self._cache[key]
                self._misses += 1
                self._expired_removals += 1
                return None

            self._cache.move_to_end(key)
            self._hits += 1
            return value

    def set(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        if ttl is not None and ttl <= 0:
            logger.debug(f"[{self.name}] set({key}): ttl={ttl} <= 0, not caching")
            return

        with self._lock:
            effective_ttl = ttl if ttl is not None else self._default_ttl
            expiry = self._clock() + effective_ttl if effective_ttl is not None else None

            if key in self._cache:
                self._cache[key] = (value, expiry)
                self._cache.move_to_end(key)
                return

            if self._max_size is not None and len(self._cache) >= self._max_size:
                self._cache.popitem(last=False)
                self._evictions += 1

            self._cache[key] = (value, expiry)

    def invalidate(self, key: str) -> bool:
        with self._lock:
            if key in self._cache:
                del self._cache[key]
                self._invalidations += 1
                return True
            return False

    def invalidate_pattern(self, prefix: str) -> int:
        """Invalida todas las entradas con un prefijo."""
        with self._lock:
            keys = [k for k in self._cache if k.startswith(prefix)]
            for key in keys:
                del self._cache[key]
            self._invalidations += len(keys)
            return len(keys)

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    def cleanup(self) -> int:
        with self._lock:
            now = self._clock()
            expired = [
                k for k, (_, expiry) in self._cache.items()
                if expiry is not None and expiry <= now
            ]
            for key in expired:
                del self._cache[key]
            self._expired_removals += len(expired)
        if expired:
            logger.debug(f"[{self.name}] cleanup: {len(expired)} entradas expiradas")
        return len(expired)

    def get_stats(self) -> dict:
        with self._lock:
            total = self._hits + self._misses
            return {
                "name": self.name,
                "size": len(self._cache),
                "max_size": self._max_size,
                "hits": self._hits,
                "misses": self._misses,
                "evictions": self._evictions,
                "invalidations": self._invalidations,
                "expired_removals": self._expired_removals,
                "hit_rate_percent": round(self._hits * 100 / total, 2) if total else 0.0,
                "total_requests": total,
            }


__all__ = ["MemoryCache"]

# Fin del archivo pitbox/shared/cache/memory_cache.py
