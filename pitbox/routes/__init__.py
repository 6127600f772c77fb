# -*- coding: utf-8 -*-
"""
pitbox/routes/__init__.py

Ensamblador principal de ruteadores de PitBox.

Autor: PitBox
Fecha: 2026-09-27
"""

from fastapi import APIRouter

from pitbox.modules.accounts.routes import router as accounts_router
from pitbox.modules.catalog.routes import router as catalog_router
from pitbox.modules.payments.routes import router as payments_router
from .health_routes import router as health_router

router = APIRouter()

router.include_router(health_router)
router.include_router(accounts_router)
router.include_router(payments_router)
router.include_router(catalog_router)

__all__ = ["router"]

# Fin del archivo pitbox/routes/__init__.py
