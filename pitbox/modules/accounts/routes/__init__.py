# -*- coding: utf-8 -*-
"""
pitbox/modules/accounts/routes/__init__.py

Autor: PitBox
Fecha: 2026-09-26
"""

from fastapi import APIRouter

from .auth_routes import router as auth_router

router = APIRouter()
router.include_router(auth_router)

__all__ = ["router"]

# Fin del archivo pitbox/modules/accounts/routes/__init__.py
