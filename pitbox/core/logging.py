# -*- coding: utf-8 -*-
"""
pitbox/core/logging.py

Configuración centralizada de logging para PitBox.
Actúa como fachada del módulo `pitbox.shared.config.logging_config`.

Autor: PitBox
Fecha: 2026-09-14
"""

from typing import Literal

from pitbox.shared.config.logging_config import setup_logging as _setup_logging


def setup_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO",
    fmt: Literal["plain", "pretty", "json"] = "plain",
) -> None:
    """
    Configura el sistema de logging de la aplicación.

    Args:
        level: Nivel de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        fmt: Formato de salida (plain, pretty, json).
    """
    _setup_logging(level=level, fmt=fmt)

# Fin del archivo pitbox/core/logging.py
