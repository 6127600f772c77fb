# -*- coding: utf-8 -*-
"""
pitbox/shared/config/logging_config.py

Configuración centralizada de logging para PitBox.
Soporta formato plain (desarrollo) y json (producción).

Autor: PitBox
Fecha: 2026-09-14
"""

import importlib
import logging.config
from typing import Literal


def _json_formatter_path() -> str:
    # python-json-logger v3+ movió jsonlogger -> json
    try:
        importlib.import_module("pythonjsonlogger.json")
        return "pythonjsonlogger.json.JsonFormatter"
    except ImportError:  # pragma: no cover
        return "pythonjsonlogger.jsonlogger.JsonFormatter"


def setup_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO",
    fmt: Literal["plain", "pretty", "json"] = "plain"
) -> None:
    """
    Configura el sistema de logging de la aplicación.

    Args:
        level: Nivel de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        fmt: Formato de salida (plain, pretty, json)

    Ejemplos:
        >>> setup_logging("INFO", "plain")
        >>> setup_logging("WARNING", "json")
    """
    use_json = fmt == "json"

    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json" if use_json else ("pretty" if fmt == "pretty" else "default"),
            "stream": "ext://sys.stdout",
        }
    }

    formatters = {
        "default": {
            "format": "%(levelname)s [%(name)s]: %(message)s"
        },
        "pretty": {
            "format": "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
        "json": {
            "()": _json_formatter_path(),
            "format": "%(asctime)s %(name)s %(levelname)s %(message)s"
        },
    }

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "handlers": handlers,
        "loggers": {
            # httpx registra cada request en INFO; demasiado ruido para el polling
            "httpx": {"level": "WARNING"},
        },
        "root": {
            "handlers": ["console"],
            "level": level.upper(),
        },
    }

    logging.config.dictConfig(logging_config)


def mask_phone(phone_number: str | None) -> str:
    """Enmascara un teléfono para logs: +2567****0000."""
    if not phone_number:
        return "<vacío>"
    if len(phone_number) <= 9:
        return "*" * len(phone_number)
    return f"{phone_number[:5]}{'*' * (len(phone_number) - 9)}{phone_number[-4:]}"


__all__ = ["setup_logging", "mask_phone"]
# Fin del archivo pitbox/shared/config/logging_config.py
