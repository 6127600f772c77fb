# -*- coding: utf-8 -*-
"""
pitbox/modules/payments/facades/__init__.py

Fachadas de alto nivel del módulo de pagos.

Autor: PitBox
Fecha: 2026-09-23
"""

# Fin del archivo pitbox/modules/payments/facades/__init__.py
