# -*- coding: utf-8 -*-
"""
pitbox/shared/config/settings_base.py

Base de configuración (Pydantic v2) para PitBox.
- Esta clase NO instancia singletons; eso lo hace config_loader.
- Es la base para settings_dev.py, settings_testing.py y settings_prod.py.

Autor: PitBox
Fecha: 2026-09-14
"""

from typing import Literal, Optional

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Tipos de entorno soportados
EnvName = Literal["development", "test", "production"]


class BaseAppSettings(BaseSettings):
    # =========================
    # Núcleo de la aplicación
    # =========================
    python_env: EnvName = Field(default="development", validation_alias="PYTHON_ENV")
    app_name: str = Field(default="PitBox", validation_alias="APP_NAME")
    app_version: str = Field(default="0.3.0", validation_alias="APP_VERSION")
    app_host: str = Field(default="0.0.0.0", validation_alias="APP_HOST")
    app_port: int = Field(default=8000, validation_alias="APP_PORT")
    debug: bool = Field(default=False, validation_alias="DEBUG")

    # =========================
    # Servicios externos
    # =========================
    content_api_url: str = Field(
        default="https://mintos-vd.vercel.app",
        validation_alias="CONTENT_API_URL",
        description="API del catálogo (películas, series, búsqueda, solicitudes)",
    )
    account_api_url: str = Field(
        default="https://pitbox-ten.vercel.app",
        validation_alias="ACCOUNT_API_URL",
        description="API de cuentas y suscripciones",
    )

    # =========================
    # Cliente HTTP
    # =========================
    http_connect_timeout: float = Field(default=10.0, validation_alias="HTTP_CONNECT_TIMEOUT")
    http_read_timeout: float = Field(default=30.0, validation_alias="HTTP_READ_TIMEOUT")
    http_transport_retries: int = Field(default=2, validation_alias="HTTP_TRANSPORT_RETRIES")
    http_extra_headers: dict[str, str] = Field(default_factory=dict, validation_alias="HTTP_EXTRA_HEADERS")

    # =========================
    # Catálogo (caché L1)
    # =========================
    catalog_cache_ttl_seconds: int = Field(default=300, validation_alias="CATALOG_CACHE_TTL_SECONDS")
    catalog_cache_max_size: int = Field(default=512, validation_alias="CATALOG_CACHE_MAX_SIZE")
    catalog_max_retries: int = Field(default=2, validation_alias="CATALOG_MAX_RETRIES")

    # =========================
    # Almacén clave/valor (contexto de flujo)
    # =========================
    kv_store_backend: Literal["memory", "file"] = Field(default="file", validation_alias="KV_STORE_BACKEND")
    kv_store_path: str = Field(default=".pitbox/store.json", validation_alias="KV_STORE_PATH")

    # =========================
    # CORS / Frontend
    # =========================
    allowed_origins: str = Field(default="*", validation_alias="CORS_ORIGINS")

    # =========================
    # Logging
    # =========================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_format: Literal["json", "pretty", "plain"] = Field(default="pretty", validation_alias="LOG_FORMAT")

    # ===== Helpers de entorno =====
    @computed_field  # type: ignore[misc]
    @property
    def is_dev(self) -> bool:
        return self.python_env == "development"

    @computed_field  # type: ignore[misc]
    @property
    def is_test(self) -> bool:
        return self.python_env == "test"

    @computed_field  # type: ignore[misc]
    @property
    def is_prod(self) -> bool:
        return self.python_env == "production"

    @field_validator("content_api_url", "account_api_url", mode="after")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    # ===== Utilidad para normalizar CORS =====
    def get_cors_origins(self) -> list[str]:
        """Convierte allowed_origins en lista procesable para CORS middleware."""
        if not self.allowed_origins or self.allowed_origins == "*":
            return ["*"]
        return [o.strip().strip('"').strip("'") for o in self.allowed_origins.split(",") if o.strip()]

    def _security_checks(self) -> None:
        """
        Validaciones mínimas de coherencia.
        Se invoca desde config_loader tras instanciar el settings.
        """
        import logging
        logger = logging.getLogger(__name__)

        if self.is_prod:
            for name in ("content_api_url", "account_api_url"):
                if not getattr(self, name).startswith("https://"):
                    raise ValueError(f"{name.upper()} debe usar https en producción")
            if self.kv_store_backend == "memory":
                logger.warning("KV_STORE_BACKEND=memory en producción: el contexto de flujo no sobrevive reinicios")

        if self.is_dev and self.allowed_origins == "*":
            logger.info("ℹ️ CORS abierto (*) en desarrollo")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


__all__ = ["BaseAppSettings", "EnvName"]
# Fin del archivo pitbox/shared/config/settings_base.py
