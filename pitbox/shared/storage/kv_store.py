# -*- coding: utf-8 -*-
"""
pitbox/shared/storage/kv_store.py

Almacén clave/valor persistente para el contexto de flujo.

Contrato:
- get(key, default=None): deserializa JSON; si el valor guardado no es
  JSON válido se devuelve tal cual (cadena cruda).
- set(key, value): las cadenas se guardan crudas; el resto como JSON.
- remove(key) / clear_group(keys).

Implementaciones:
- MemoryKeyValueStore: por proceso (tests, desarrollo).
- JsonFileKeyValueStore: sobrevive reinicios; cada escritura reemplaza
  el archivo de forma atómica (tempfile + os.replace).

Autor: PitBox
Fecha: 2026-09-17
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Se lanza cuando no es posible persistir un valor."""
    def __init__(self, key: str, reason: str):
        self.key = key
        super().__init__(f"No se pudo guardar '{key}': {reason}")


def _serialize(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False, default=str)


def _deserialize(raw: str) -> Any:
    try:
        return json.loads(raw)
    except (TypeError, ValueError):
        return raw


class KeyValueStore(ABC):
    """Contrato del almacén clave/valor."""

    @abstractmethod
    def _read_raw(self, key: str) -> Optional[str]:
        ...

    @abstractmethod
    def _write_raw(self, key: str, raw: str) -> None:
        ...

    @abstractmethod
    def _delete_raw(self, keys: Iterable[str]) -> None:
        ...

    def get(self, key: str, default: Any = None) -> Any:
        try:
            raw = self._read_raw(key)
        except OSError as e:
            logger.error(f"Error leyendo '{key}' del almacén: {e}")
            return default
        if not raw:
            return default
        return _deserialize(raw)

    def set(self, key: str, value: Any) -> None:
        try:
            self._write_raw(key, _serialize(value))
        except (OSError, TypeError) as e:
            logger.error(f"Error guardando '{key}' en el almacén: {e}")
            raise StorageError(key, str(e)) from e

    def remove(self, key: str) -> None:
        self._delete_raw([key])

    def clear_group(self, keys: Iterable[str]) -> None:
        self._delete_raw(list(keys))


class MemoryKeyValueStore(KeyValueStore):
    """Almacén en memoria (no sobrevive reinicios)."""

    def __init__(self) -> None:
        self._data: Dict[str, str] = {}
        self._lock = threading.Lock()

    def _read_raw(self, key: str) -> Optional[str]:
        with self._lock:
            return self._data.get(key)

    def _write_raw(self, key: str, raw: str) -> None:
        with self._lock:
            self._data[key] = raw

    def _delete_raw(self, keys: Iterable[str]) -> None:
        with self._lock:
            for key in keys:
                self._data.pop(key, None)

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._data)


class JsonFileKeyValueStore(KeyValueStore):
    """Almacén respaldado por un archivo JSON {clave: valor_serializado}."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()
        self._data: Dict[str, str] = self._load()

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            content = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except (OSError, ValueError) as e:
            logger.error(f"Almacén ilegible en {self.path}, se inicia vacío: {e}")
            return {}
        if not isinstance(content, dict):
            logger.error(f"Almacén con formato inesperado en {self.path}, se inicia vacío")
            return {}
        return {str(k): v if isinstance(v, str) else _serialize(v) for k, v in content.items()}

    def _flush(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=".kv-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except OSError:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

    def _read_raw(self, key: str) -> Optional[str]:
        with self._lock:
            return self._data.get(key)

    def _write_raw(self, key: str, raw: str) -> None:
        with self._lock:
            updated = {**self._data, key: raw}
            self._flush(updated)
            self._data = updated

    def _delete_raw(self, keys: Iterable[str]) -> None:
        drop = set(keys)
        with self._lock:
            updated = {k: v for k, v in self._data.items() if k not in drop}
            if len(updated) == len(self._data):
                return
            self._flush(updated)
            self._data = updated


def build_kv_store(backend: str, path: str) -> KeyValueStore:
    """Construye el almacén configurado (KV_STORE_BACKEND / KV_STORE_PATH)."""
    if backend == "file":
        logger.info(f"Almacén clave/valor en archivo: {path}")
        return JsonFileKeyValueStore(path)
    return MemoryKeyValueStore()


__all__ = [
    "KeyValueStore",
    "MemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "StorageError",
    "build_kv_store",
]

# Fin del archivo pitbox/shared/storage/kv_store.py
