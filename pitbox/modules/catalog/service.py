# -*- coding: utf-8 -*-
"""
pitbox/modules/catalog/service.py

Servicio de catálogo con caché en memoria.

Claves de caché:
- movies:list:{limit}:{skip}   movies:detail:{id}
- series:list:{limit}:{skip}   series:detail:{id}
- search:{q}:{limit}           suggest:{q}
- movies:search:{query}

Los resultados ya vienen normalizados a MediaItem (salvo suggest).

Autor: PitBox
Fecha: 2026-09-25
"""

from __future__ import annotations

import logging
from typing import Awaitable, Callable, List, Optional, TypeVar

from pitbox.shared.cache import CacheBackend
from .client import CatalogClient
from .normalize import normalize_movie, normalize_search_result, normalize_series
from .schemas import MediaItem, SuggestResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CatalogService:

    def __init__(self, client: CatalogClient, cache: CacheBackend, ttl: Optional[int] = None):
        self._client = client
        self._cache = cache
        self._ttl = ttl

    @property
    def cache(self) -> CacheBackend:
        return self._cache

    async def _cached(self, key: str, loader: Callable[[], Awaitable[T]]) -> T:
        hit = self._cache.get(key)
        if hit is not None:
            return hit
        value = await loader()
        self._cache.set(key, value, ttl=self._ttl)
        return value

    async def list_movies(self, limit: int = 50, skip: int = 0) -> List[MediaItem]:
        async def load():
            return [normalize_movie(m) for m in await self._client.movies(limit, skip)]
        return await self._cached(f"movies:list:{limit}:{skip}", load)

    async def get_movie(self, movie_id: int) -> MediaItem:
        async def load():
            return normalize_movie(await self._client.movie(movie_id))
        return await self._cached(f"movies:detail:{movie_id}", load)

    async def list_series(self, limit: int = 50, skip: int = 0) -> List[MediaItem]:
        async def load():
            return [normalize_series(s) for s in await self._client.series(limit, skip)]
        return await self._cached(f"series:list:{limit}:{skip}", load)

    async def get_serie(self, serie_id: int) -> MediaItem:
        async def load():
            return normalize_series(await self._client.serie(serie_id))
        return await self._cached(f"series:detail:{serie_id}", load)

    async def search(self, q: str, limit: int = 20) -> List[MediaItem]:
        query = q.strip()
        if not query:
            return []

        async def load():
            return [normalize_search_result(r) for r in await self._client.search(query, limit)]
        return await self._cached(f"search:{query.lower()}:{limit}", load)

    async def suggest(self, q: str) -> List[SuggestResult]:
        query = q.strip()
        if not query:
            return []

        async def load():
            return await self._client.suggest(query)
        return await self._cached(f"suggest:{query.lower()}", load)

    async def search_movies(self, query: str) -> List[MediaItem]:
        query = query.strip()
        if not query:
            return []

        async def load():
            return [normalize_movie(m) for m in await self._client.search_movies(query)]
        return await self._cached(f"movies:search:{query.lower()}", load)

    def invalidate(self, prefix: str = "") -> int:
        """Invalida entradas por prefijo (vacío = todo)."""
        if hasattr(self._cache, "invalidate_pattern"):
            return self._cache.invalidate_pattern(prefix)
        return 0


__all__ = ["CatalogService"]

# Fin del archivo pitbox/modules/catalog/service.py
