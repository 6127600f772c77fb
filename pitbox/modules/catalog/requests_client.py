# -*- coding: utf-8 -*-
"""
pitbox/modules/catalog/requests_client.py

Tablón de peticiones de películas (mismo host que el catálogo).

- POST /request_movie        → crea una petición {name, reason}
- GET  /request_movies?limit&skip → listado, más reciente primero

Autor: PitBox
Fecha: 2026-09-25
"""

from __future__ import annotations

import logging
from typing import List

import httpx
from pydantic import ValidationError

from .errors import CatalogError
from .schemas import MovieRequest, MovieRequestResponse

logger = logging.getLogger(__name__)


class MovieRequestClient:

    def __init__(self, http: httpx.AsyncClient):
        self._http = http

    async def request_movie(self, name: str, reason: str = "") -> MovieRequestResponse:
        body = MovieRequest(name=name.strip(), reason=reason.strip())
        try:
            response = await self._http.post("/request_movie", json=body.model_dump())
        except httpx.HTTPError as e:
            raise CatalogError(f"Failed to request movie: {e}") from e
        if response.is_error:
            raise CatalogError(
                response.text.strip() or f"Failed to request movie: {response.status_code}",
                response.status_code,
            )
        try:
            created = MovieRequestResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise CatalogError("Unexpected movie request payload") from e
        logger.info(f"🎬 Petición de película registrada: '{created.name}' (id={created.id})")
        return created

    async def list_requests(self, limit: int = 100, skip: int = 0) -> List[MovieRequestResponse]:
        try:
            response = await self._http.get("/request_movies", params={"limit": limit, "skip": skip})
        except httpx.HTTPError as e:
            raise CatalogError(f"Failed to fetch requests: {e}") from e
        if response.is_error:
            raise CatalogError(
                response.text.strip() or f"Failed to fetch requests: {response.status_code}",
                response.status_code,
            )
        try:
            items = [MovieRequestResponse.model_validate(raw) for raw in response.json()]
        except (ValueError, TypeError, ValidationError) as e:
            raise CatalogError("Unexpected movie request list payload") from e
        return sorted(items, key=lambda r: r.created_at, reverse=True)


__all__ = ["MovieRequestClient"]

# Fin del archivo pitbox/modules/catalog/requests_client.py
