# -*- coding: utf-8 -*-
"""
pitbox/shared/storage/__init__.py

Autor: PitBox
Fecha: 2026-09-17
"""

from .kv_store import (
    KeyValueStore,
    MemoryKeyValueStore,
    JsonFileKeyValueStore,
    StorageError,
    build_kv_store,
)

__all__ = [
    "KeyValueStore",
    "MemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "StorageError",
    "build_kv_store",
]
