# -*- coding: utf-8 -*-
"""
pitbox/routes/health_routes.py

Health check básico de PitBox.

Autor: PitBox
Fecha: 2026-09-27
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Request

from pitbox.core.settings import get_settings

router = APIRouter()


@router.get(
    "/health",
    summary="Health check del servicio",
    description="Estado básico del servicio y número de flujos de activación con polling activo.",
)
async def health_check(request: Request) -> dict:
    settings = get_settings()
    services = getattr(request.app.state, "services", None)
    polling = services.registry.jobs.get_active_count() if services else 0

    return {
        "status": "ok" if services else "starting",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.python_env,
        "activations": {"polling": polling},
        "service": {
            "name": settings.app_name,
            "version": settings.app_version,
        },
    }

# Fin del archivo pitbox/routes/health_routes.py
