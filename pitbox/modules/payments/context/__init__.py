# -*- coding: utf-8 -*-
"""
pitbox/modules/payments/context/__init__.py

Autor: PitBox
Fecha: 2026-09-22
"""

from .flow_context import DEFAULT_NAMESPACE, FlowContext

__all__ = ["FlowContext", "DEFAULT_NAMESPACE"]

# Fin del archivo pitbox/modules/payments/context/__init__.py
