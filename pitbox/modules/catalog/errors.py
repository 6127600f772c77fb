# -*- coding: utf-8 -*-
"""
pitbox/modules/catalog/errors.py

Autor: PitBox
Fecha: 2026-09-25
"""

from typing import Optional


class CatalogError(Exception):
    """Fallo del API de contenido (red, status no 2xx o cuerpo inválido)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class CatalogNotFound(CatalogError):
    def __init__(self, resource: str, item_id):
        super().__init__(f"{resource} {item_id} not found", status_code=404)


__all__ = ["CatalogError", "CatalogNotFound"]

# Fin del archivo pitbox/modules/catalog/errors.py
