# -*- coding: utf-8 -*-
"""
pitbox/shared/config/settings_testing.py

Overrides para entorno de PRUEBAS (test) usando Pydantic v2.
Determinista: almacén en memoria, logging moderado y URLs locales
que nunca deben resolverse (los tests usan transportes simulados).

Autor: PitBox
Fecha: 2026-09-14
"""

from pydantic_settings import SettingsConfigDict

from .settings_base import BaseAppSettings


class EnvTestingSettings(BaseAppSettings):
    # --- Identidad de entorno ---
    python_env: str = "test"

    # --- Logging en test: menos ruido ---
    log_level: str = "WARNING"
    log_format: str = "pretty"

    # --- Servicios externos: nunca reales en tests ---
    content_api_url: str = "http://content.test"
    account_api_url: str = "http://accounts.test"

    # --- Estado efímero ---
    kv_store_backend: str = "memory"
    catalog_max_retries: int = 0

    model_config = SettingsConfigDict(
        env_file=".env.test",
        env_file_encoding="utf-8",
        extra="ignore",
    )


__all__ = ["EnvTestingSettings"]

# Fin del archivo pitbox/shared/config/settings_testing.py
