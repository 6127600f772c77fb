# -*- coding: utf-8 -*-
"""
pitbox/shared/utils/__init__.py

Autor: PitBox
Fecha: 2026-09-19
"""

from .phone import normalize_ug_phone, UG_PREFIX

__all__ = ["normalize_ug_phone", "UG_PREFIX"]
