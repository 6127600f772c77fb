# -*- coding: utf-8 -*-
"""
pitbox/modules/catalog/schemas.py

Modelos del API de contenido (películas, series, búsqueda) y del
tablón de peticiones de películas.

Autor: PitBox
Fecha: 2026-09-25
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class _ContentModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class PitBoxMovie(_ContentModel):
    id: int
    name: str
    description: Optional[str] = ""
    poster_url: Optional[str] = None
    genre: Optional[str] = None
    vj_name: Optional[str] = None
    directors: Optional[str] = None
    duration: Optional[str] = None
    release_date: Optional[str] = None
    category_name: Optional[str] = None
    stars: Optional[float] = 0
    video_url: Optional[str] = None
    created_at: Optional[str] = None


class PitBoxEpisode(_ContentModel):
    id: int
    name: str
    video_url: Optional[str] = None
    poster_url: Optional[str] = None
    genre: Optional[str] = None
    stars: Optional[float] = 0
    vj_name: Optional[str] = None
    created_at: Optional[str] = None
    serie_id: Optional[int] = None


class PitBoxSeries(_ContentModel):
    id: int
    name: str
    description: Optional[str] = ""
    poster_url: Optional[str] = None
    genre: Optional[str] = None
    vj_name: Optional[str] = None
    duration: Optional[str] = None
    release_date: Optional[str] = None
    category_name: Optional[str] = None
    stars: Optional[float] = 0
    created_at: Optional[str] = None
    episodes: List[PitBoxEpisode] = Field(default_factory=list)


class PitBoxSearchItem(PitBoxMovie):
    episodes: Optional[List[Any]] = None


class SearchResult(_ContentModel):
    type: Literal["movie", "serie"]
    score: float
    item: PitBoxSearchItem


class SuggestResult(_ContentModel):
    name: str
    score: float


class MediaItem(BaseModel):
    """Forma común de película/serie usada por listados y búsqueda."""

    id: int
    title: str
    name: str
    overview: str = ""
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    vote_average: float = 0
    release_date: str = ""
    first_air_date: Optional[str] = None
    genre_ids: List[int] = Field(default_factory=list)
    media_type: Literal["movie", "tv"]
    genre: Optional[str] = None
    vj_name: Optional[str] = None
    directors: Optional[str] = None
    duration: Optional[str] = None
    category_name: Optional[str] = None
    video_url: Optional[str] = None
    poster_url: Optional[str] = None
    episodes: Optional[List[PitBoxEpisode]] = None
    type: Optional[Literal["movie", "serie"]] = None


class MovieRequest(BaseModel):
    name: str = Field(..., min_length=1)
    reason: str = ""


class MovieRequestResponse(MovieRequest):
    model_config = ConfigDict(extra="ignore")

    id: int
    created_at: datetime


__all__ = [
    "PitBoxMovie",
    "PitBoxEpisode",
    "PitBoxSeries",
    "PitBoxSearchItem",
    "SearchResult",
    "SuggestResult",
    "MediaItem",
    "MovieRequest",
    "MovieRequestResponse",
]

# Fin del archivo pitbox/modules/catalog/schemas.py
