# -*- coding: utf-8 -*-
"""
pitbox/core/__init__.py

Fachadas estables de configuración y logging.

Autor: PitBox
Fecha: 2026-09-14
"""

from .settings import get_settings
from .logging import setup_logging

__all__ = ["get_settings", "setup_logging"]

# Fin del archivo pitbox/core/__init__.py
