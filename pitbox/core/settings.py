# -*- coding: utf-8 -*-
"""
pitbox/core/settings.py

Fachada de configuración para PitBox.
Reexpone la carga de settings basada en Pydantic v2 definida en
`pitbox.shared.config`.

Autor: PitBox
Fecha: 2026-09-14
"""

from typing import cast

from pitbox.shared.config.config_loader import get_settings as _get_settings
from pitbox.shared.config.settings_base import BaseAppSettings


def get_settings() -> BaseAppSettings:
    """
    Devuelve la configuración global de la aplicación.

    Returns:
        BaseAppSettings: instancia de configuración (según PYTHON_ENV).
    """
    settings = _get_settings()
    return cast(BaseAppSettings, settings)

# Fin del archivo pitbox/core/settings.py
