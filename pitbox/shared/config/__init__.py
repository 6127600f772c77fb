# -*- coding: utf-8 -*-
"""
pitbox/shared/config/__init__.py

Punto único de acceso a la configuración:
    from pitbox.shared.config import get_settings, get_payments_settings

Autor: PitBox
Fecha: 2026-09-15
"""

from .config_loader import get_settings
from .logging_config import setup_logging, mask_phone
from .settings_base import BaseAppSettings
from .settings_payments import PaymentsSettings, get_payments_settings

__all__ = [
    "BaseAppSettings",
    "PaymentsSettings",
    "get_settings",
    "get_payments_settings",
    "setup_logging",
    "mask_phone",
]
# Fin del archivo pitbox/shared/config/__init__.py
