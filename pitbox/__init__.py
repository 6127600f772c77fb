# -*- coding: utf-8 -*-
"""
pitbox/__init__.py

Paquete principal del backend de suscripciones PitBox.

Aloja el flujo de activación de suscripciones por dinero móvil y los
clientes tipados de los servicios externos (catálogo, cuentas, pasarela).

Autor: PitBox
Fecha: 2026-09-14
"""

__version__ = "0.3.0"

# Fin del archivo pitbox/__init__.py
