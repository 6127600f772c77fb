# -*- coding: utf-8 -*-
"""
pitbox/observability/__init__.py

Autor: PitBox
Fecha: 2026-09-27
"""

from .prom import setup_observability

__all__ = ["setup_observability"]
