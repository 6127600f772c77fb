# -*- coding: utf-8 -*-
"""
pitbox/shared/cache/cache_backend.py

Interfaz base (ABC) para backends de caché.

Define el contrato de la caché L1 del catálogo (MemoryCache) para
garantizar operaciones y métricas consistentes.

Propiedades esperadas:
- max_size: Tamaño máximo del caché (None = sin límite)
- default_ttl: TTL por defecto en segundos (None = no expira por defecto)

Métricas esperadas en get_stats():
- size, hits, misses, evictions, invalidations, expired_removals,
  hit_rate_percent, total_requests

Autor: PitBox
Fecha: 2026-09-17
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional


class CacheBackend(ABC):
    """Interfaz abstracta para backends de caché."""

    @property
    @abstractmethod
    def max_size(self) -> Optional[int]:
        """Tamaño máximo del caché. None si no tiene límite."""
        ...

    @property
    @abstractmethod
    def default_ttl(self) -> Optional[int]:
        """TTL por defecto en segundos. None si las entradas no expiran por defecto."""
        ...

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Obtiene un valor del caché o None si no existe/expiró."""
        ...

    @abstractmethod
    def set(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        """
        Almacena un valor en el caché.

        Args:
            key: Clave única
            value: Valor a almacenar
            ttl: None = default_ttl; 0 o negativo = no cachear; positivo = TTL
        """
        ...

    @abstractmethod
    def invalidate(self, key: str) -> bool:
        """Invalida una entrada. True si existía."""
        ...

    @abstractmethod
    def cleanup(self) -> int:
        """Elimina entradas expiradas. Devuelve cuántas se eliminaron."""
        ...

    @abstractmethod
    def get_stats(self) -> dict:
        """Retorna estadísticas del caché."""
        ...

# Fin del archivo pitbox/shared/cache/cache_backend.py
