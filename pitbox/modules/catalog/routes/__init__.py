# -*- coding: utf-8 -*-
"""
pitbox/modules/catalog/routes/__init__.py

Autor: PitBox
Fecha: 2026-09-26
"""

from fastapi import APIRouter

from .catalog_routes import router as catalog_router

router = APIRouter()
router.include_router(catalog_router)

__all__ = ["router"]

# Fin del archivo pitbox/modules/catalog/routes/__init__.py
