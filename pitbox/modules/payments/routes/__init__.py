# -*- coding: utf-8 -*-
"""
pitbox/modules/payments/routes/__init__.py

Ensamblador de rutas del módulo Payments.

Incluye:
- /subscriptions/packages, /subscriptions/selection
- /subscriptions/activations/*, /subscriptions/redeem
- /payments/webhook

Autor: PitBox
Fecha: 2026-09-26
"""

from fastapi import APIRouter

from .activations import router as activations_router
from .packages import router as packages_router
from .webhook import router as webhook_router

router = APIRouter()

router.include_router(packages_router, prefix="/subscriptions")
router.include_router(activations_router, prefix="/subscriptions")
router.include_router(webhook_router, prefix="/payments")

__all__ = ["router"]

# Fin del archivo pitbox/modules/payments/routes/__init__.py
