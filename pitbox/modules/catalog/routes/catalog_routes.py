# -*- coding: utf-8 -*-
"""
pitbox/modules/catalog/routes/catalog_routes.py

Lecturas del catálogo (cacheadas) y tablón de peticiones.

Endpoints:
- GET  /catalog/movies, /catalog/movies/{id}
- GET  /catalog/series, /catalog/series/{id}
- GET  /catalog/search?q&limit, /catalog/suggest?q, /catalog/movies-search?query
- GET  /catalog/requests, POST /catalog/requests

Autor: PitBox
Fecha: 2026-09-26
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from pitbox.core.container import PitBoxServices, get_services
from pitbox.modules.catalog.errors import CatalogError, CatalogNotFound
from pitbox.modules.catalog.schemas import (
    MediaItem,
    MovieRequest,
    MovieRequestResponse,
    SuggestResult,
)

router = APIRouter(prefix="/catalog", tags=["catalog"])


def _http_error(e: CatalogError) -> HTTPException:
    if isinstance(e, CatalogNotFound):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)


@router.get("/movies", response_model=List[MediaItem])
async def list_movies(
    limit: int = Query(50, ge=1, le=200),
    skip: int = Query(0, ge=0),
    services: PitBoxServices = Depends(get_services),
):
    try:
        return await services.catalog.list_movies(limit, skip)
    except CatalogError as e:
        raise _http_error(e) from e


@router.get("/movies/{movie_id}", response_model=MediaItem)
async def get_movie(movie_id: int, services: PitBoxServices = Depends(get_services)):
    try:
        return await services.catalog.get_movie(movie_id)
    except CatalogError as e:
        raise _http_error(e) from e


@router.get("/series", response_model=List[MediaItem])
async def list_series(
    limit: int = Query(50, ge=1, le=200),
    skip: int = Query(0, ge=0),
    services: PitBoxServices = Depends(get_services),
):
    try:
        return await services.catalog.list_series(limit, skip)
    except CatalogError as e:
        raise _http_error(e) from e


@router.get("/series/{serie_id}", response_model=MediaItem)
async def get_serie(serie_id: int, services: PitBoxServices = Depends(get_services)):
    try:
        return await services.catalog.get_serie(serie_id)
    except CatalogError as e:
        raise _http_error(e) from e


@router.get("/search", response_model=List[MediaItem])
async def search(
    q: str = Query(..., min_length=1),
    limit: int = Query(20, ge=1, le=100),
    services: PitBoxServices = Depends(get_services),
):
    try:
        return await services.catalog.search(q, limit)
    except CatalogError as e:
        raise _http_error(e) from e


@router.get("/suggest", response_model=List[SuggestResult])
async def suggest(q: str = Query(..., min_length=1), services: PitBoxServices = Depends(get_services)):
    try:
        return await services.catalog.suggest(q)
    except CatalogError as e:
        raise _http_error(e) from e


@router.get("/movies-search", response_model=List[MediaItem])
async def search_movies(
    query: str = Query(..., min_length=1),
    services: PitBoxServices = Depends(get_services),
):
    try:
        return await services.catalog.search_movies(query)
    except CatalogError as e:
        raise _http_error(e) from e


@router.get("/requests", response_model=List[MovieRequestResponse])
async def list_requests(
    limit: int = Query(100, ge=1, le=500),
    skip: int = Query(0, ge=0),
    services: PitBoxServices = Depends(get_services),
):
    try:
        return await services.movie_requests.list_requests(limit, skip)
    except CatalogError as e:
        raise _http_error(e) from e


@router.post("/requests", response_model=MovieRequestResponse, status_code=status.HTTP_201_CREATED)
async def request_movie(body: MovieRequest, services: PitBoxServices = Depends(get_services)):
    try:
        return await services.movie_requests.request_movie(body.name, body.reason)
    except CatalogError as e:
        raise _http_error(e) from e


__all__ = ["router"]

# Fin del archivo pitbox/modules/catalog/routes/catalog_routes.py
