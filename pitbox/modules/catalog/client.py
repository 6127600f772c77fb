# -*- coding: utf-8 -*-
"""
pitbox/modules/catalog/client.py

Cliente async del API de contenido.

Endpoints:
- GET /movies/?limit&skip, GET /movies/{id}
- GET /series/?limit&skip, GET /series/{id}
- GET /search/?q&limit, GET /search/suggest?q
- GET /movies/search/?query (legacy)

Todas son lecturas idempotentes y se reintentan con backoff ante
errores de transporte, 429 y 5xx.

Autor: PitBox
Fecha: 2026-09-25
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from pitbox.shared.core import retry_with_backoff
from .errors import CatalogError, CatalogNotFound
from .schemas import PitBoxMovie, PitBoxSeries, SearchResult, SuggestResult

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class CatalogClient:
    """Lecturas del catálogo de películas y series."""

    def __init__(self, http: httpx.AsyncClient, *, max_retries: int = 2, base_delay: float = 0.5):
        self._http = http
        self._max_retries = max_retries
        self._base_delay = base_delay

    async def _get_json(self, path: str, params: Optional[dict] = None) -> Any:
        try:
            response = await retry_with_backoff(
                self._http.get,
                path,
                max_retries=self._max_retries,
                base_delay=self._base_delay,
                params=params,
            )
        except httpx.HTTPError as e:
            raise CatalogError(f"PitBox API unreachable: {e}") from e

        if response.is_error:
            raise CatalogError(f"PitBox API Error: {response.status_code}", response.status_code)
        try:
            return response.json()
        except ValueError as e:
            raise CatalogError(f"Invalid JSON from PitBox API ({path})") from e

    async def _get_one(self, model: Type[M], path: str, resource: str, item_id: int) -> M:
        try:
            payload = await self._get_json(path)
        except CatalogError as e:
            if e.status_code == 404:
                raise CatalogNotFound(resource, item_id) from e
            raise
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            raise CatalogError(f"Unexpected {resource} payload") from e

    async def _get_many(self, model: Type[M], path: str, params: Optional[dict] = None) -> List[M]:
        payload = await self._get_json(path, params)
        if not isinstance(payload, list):
            raise CatalogError(f"Expected a list from {path}")
        items = []
        for raw in payload:
            try:
                items.append(model.model_validate(raw))
            except ValidationError as e:
                logger.warning(f"Elemento descartado de {path}: {e.error_count()} errores de validación")
        return items

    async def movies(self, limit: int = 50, skip: int = 0) -> List[PitBoxMovie]:
        return await self._get_many(PitBoxMovie, "/movies/", {"limit": limit, "skip": skip})

    async def movie(self, movie_id: int) -> PitBoxMovie:
        return await self._get_one(PitBoxMovie, f"/movies/{movie_id}", "Movie", movie_id)

    async def series(self, limit: int = 50, skip: int = 0) -> List[PitBoxSeries]:
        return await self._get_many(PitBoxSeries, "/series/", {"limit": limit, "skip": skip})

    async def serie(self, serie_id: int) -> PitBoxSeries:
        return await self._get_one(PitBoxSeries, f"/series/{serie_id}", "Series", serie_id)

    async def search(self, q: str, limit: int = 20) -> List[SearchResult]:
        return await self._get_many(SearchResult, "/search/", {"q": q, "limit": limit})

    async def suggest(self, q: str) -> List[SuggestResult]:
        return await self._get_many(SuggestResult, "/search/suggest", {"q": q})

    async def search_movies(self, query: str) -> List[PitBoxMovie]:
        return await self._get_many(PitBoxMovie, "/movies/search/", {"query": query})


__all__ = ["CatalogClient"]

# Fin del archivo pitbox/modules/catalog/client.py
