# -*- coding: utf-8 -*-
"""
pitbox/modules/__init__.py

Módulos de dominio: catálogo, cuentas y pagos.

Autor: PitBox
Fecha: 2026-09-19
"""
