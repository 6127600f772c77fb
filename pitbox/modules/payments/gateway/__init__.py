# -*- coding: utf-8 -*-
"""
pitbox/modules/payments/gateway/__init__.py

Autor: PitBox
Fecha: 2026-09-21
"""

from .client import PaymentGatewayClient
from .errors import GatewayError

__all__ = ["PaymentGatewayClient", "GatewayError"]

# Fin del archivo pitbox/modules/payments/gateway/__init__.py
