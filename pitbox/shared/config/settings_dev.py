# -*- coding: utf-8 -*-
"""
pitbox/shared/config/settings_dev.py

Overrides para entorno de DESARROLLO usando Pydantic v2.

Autor: PitBox
Fecha: 2026-09-14
"""

from pydantic_settings import SettingsConfigDict

from .settings_base import BaseAppSettings


class DevSettings(BaseAppSettings):
    """Configuración para entorno de desarrollo."""

    python_env: str = "development"

    # Logging
    log_level: str = "DEBUG"
    log_format: str = "plain"  # formato legible en consola

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


__all__ = ["DevSettings"]

# Fin del archivo pitbox/shared/config/settings_dev.py
