# -*- coding: utf-8 -*-
"""
pitbox/modules/catalog/__init__.py

Catálogo de contenido (películas, series, búsqueda) y tablón de
peticiones de películas.

Autor: PitBox
Fecha: 2026-09-25
"""

from .client import CatalogClient
from .errors import CatalogError, CatalogNotFound
from .normalize import normalize_movie, normalize_search_result, normalize_series
from .requests_client import MovieRequestClient
from .service import CatalogService

__all__ = [
    "CatalogClient",
    "CatalogError",
    "CatalogNotFound",
    "normalize_movie",
    "normalize_search_result",
    "normalize_series",
    "MovieRequestClient",
    "CatalogService",
]

# Fin del archivo pitbox/modules/catalog/__init__.py
