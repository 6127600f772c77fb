# -*- coding: utf-8 -*-
"""
pitbox/main.py

Punto de entrada del servicio PitBox.

Ajustes clave:
- .env cargado antes de leer configuración (override solo fuera de producción)
- Logging según LOG_LEVEL / LOG_FORMAT vía pitbox.core.logging
- Contenedor de servicios creado en el lifespan y guardado en app.state
- Shutdown ordenado: cancela los loops de confirmación y cierra los
  clientes HTTP compartidos
- Observabilidad Prometheus (/metrics) y health (/health)

Autor: PitBox
Fecha: 2026-09-27
"""

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Awaitable, Callable, Optional

# ---------------------------------------------------------------------------
# Cargar .env ANTES de cualquier import que lea configuración
# ---------------------------------------------------------------------------
from dotenv import load_dotenv

_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
_PYTHON_ENV = os.getenv("PYTHON_ENV", "development").strip().strip('"').strip("'").lower()
load_dotenv(dotenv_path=_ENV_PATH, override=_PYTHON_ENV == "development")

import anyio
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pitbox import __version__
from pitbox.core.container import PitBoxServices, build_services
from pitbox.core.logging import setup_logging
from pitbox.core.settings import get_settings
from pitbox.observability import setup_observability
from pitbox.routes import router as api_router

logger = logging.getLogger(__name__)

ServicesFactory = Callable[[], Awaitable[PitBoxServices]]


def _configure_cors(app_instance: FastAPI) -> None:
    settings = get_settings()
    origins = settings.get_cors_origins()
    wildcard = origins == ["*"]
    if wildcard and settings.is_prod:
        logger.warning("⚠️ CORS abierto (*) en producción; configure CORS_ORIGINS")

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # "*" con credenciales es inválido en navegadores
        allow_credentials=not wildcard,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        max_age=600,
    )
    logger.info(f"CORS configurado: origins={origins}")


def create_app(services_factory: Optional[ServicesFactory] = None) -> FastAPI:
    """
    Construye la aplicación.

    Args:
        services_factory: coroutine que crea el contenedor (tests);
            por defecto build_services() con la configuración activa.
    """
    settings = get_settings()
    factory = services_factory or build_services

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # ────────── STARTUP ──────────
        setup_logging(settings.log_level, settings.log_format)
        app.state.services = await factory()
        logger.info(f"🟢 {settings.app_name} {__version__} iniciado ({settings.python_env})")
        try:
            yield
        finally:
            # ────────── SHUTDOWN ──────────
            logger.info("🔴 Iniciando shutdown ordenado...")
            with anyio.CancelScope(shield=True):
                await app.state.services.aclose()
            logger.info(f"🔴 {settings.app_name} apagado.")

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Catálogo, sesión y activación de suscripciones por dinero móvil",
        version=__version__,
        lifespan=lifespan,
        openapi_tags=[
            {"name": "auth", "description": "Sesión contra el servicio de cuentas"},
            {"name": "subscriptions:plans", "description": "Planes y selección pendiente"},
            {"name": "subscriptions:activation", "description": "Pago, confirmación y canje"},
            {"name": "payments:webhook", "description": "Callback de la pasarela"},
            {"name": "catalog", "description": "Películas, series y peticiones"},
        ],
    )

    _configure_cors(app)
    setup_observability(app)
    app.include_router(api_router)
    return app


app = create_app()


if __name__ == "__main__":
    _settings = get_settings()
    uvicorn.run(
        "pitbox.main:app",
        host=_settings.app_host,
        port=_settings.app_port,
        reload=_settings.is_dev,
    )

# Fin del archivo pitbox/main.py
