# -*- coding: utf-8 -*-
"""
pitbox/shared/cache/__init__.py

Autor: PitBox
Fecha: 2026-09-17
"""

from .cache_backend import CacheBackend
from .memory_cache import MemoryCache

__all__ = ["CacheBackend", "MemoryCache"]
