# -*- coding: utf-8 -*-
"""
pitbox/shared/__init__.py

Infraestructura compartida: configuración, cliente HTTP, almacenamiento
clave/valor, caché y utilidades.

Autor: PitBox
Fecha: 2026-09-14
"""

# Fin del archivo pitbox/shared/__init__.py
