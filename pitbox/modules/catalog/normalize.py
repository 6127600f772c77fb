# -*- coding: utf-8 -*-
"""
pitbox/modules/catalog/normalize.py

Normalización de películas, series y resultados de búsqueda a MediaItem.

El API no expone backdrop: se reutiliza el póster. Las estrellas
se usan como valoración.

Autor: PitBox
Fecha: 2026-09-25
"""

from __future__ import annotations

from .schemas import MediaItem, PitBoxMovie, PitBoxSeries, SearchResult


def normalize_movie(m: PitBoxMovie) -> MediaItem:
    return MediaItem(
        id=m.id,
        title=m.name,
        name=m.name,
        overview=m.description or "",
        poster_path=m.poster_url,
        backdrop_path=m.poster_url,
        vote_average=m.stars or 0,
        release_date=m.release_date or "",
        media_type="movie",
        genre=m.genre,
        vj_name=m.vj_name,
        directors=m.directors,
        duration=m.duration,
        category_name=m.category_name,
        video_url=m.video_url,
        poster_url=m.poster_url,
    )


def normalize_series(s: PitBoxSeries) -> MediaItem:
    return MediaItem(
        id=s.id,
        title=s.name,
        name=s.name,
        overview=s.description or "",
        poster_path=s.poster_url,
        backdrop_path=s.poster_url,
        vote_average=s.stars or 0,
        release_date=s.release_date or "",
        first_air_date=s.release_date or "",
        media_type="tv",
        genre=s.genre,
        vj_name=s.vj_name,
        duration=s.duration,
        category_name=s.category_name,
        poster_url=s.poster_url,
        episodes=s.episodes,
    )


def normalize_search_result(result: SearchResult) -> MediaItem:
    m = result.item
    is_serie = result.type == "serie"
    return MediaItem(
        id=m.id,
        title=m.name,
        name=m.name,
        overview=m.description or "",
        poster_path=m.poster_url,
        backdrop_path=m.poster_url,
        vote_average=m.stars or 0,
        release_date=m.release_date or "",
        first_air_date=m.release_date if is_serie else None,
        media_type="tv" if is_serie else "movie",
        genre=m.genre,
        vj_name=m.vj_name,
        directors=m.directors,
        duration=m.duration,
        category_name=m.category_name,
        video_url=m.video_url,
        poster_url=m.poster_url,
        type=result.type,
    )


__all__ = ["normalize_movie", "normalize_series", "normalize_search_result"]

# Fin del archivo pitbox/modules/catalog/normalize.py
