# -*- coding: utf-8 -*-
"""
pitbox/modules/payments/gateway/errors.py

Errores de la pasarela de dinero móvil.

Autor: PitBox
Fecha: 2026-09-21
"""

from typing import Optional


class GatewayError(Exception):
    """
    Fallo de red, rechazo o cuerpo inválido de la pasarela.

    Attributes:
        operation: 'initialize' o 'verify'
        status_code: código HTTP cuando hubo respuesta
    """

    def __init__(
        self,
        message: str,
        *,
        operation: str,
        status_code: Optional[int] = None,
    ):
        self.message = message
        self.operation = operation
        self.status_code = status_code
        super().__init__(message)


__all__ = ["GatewayError"]

# Fin del archivo pitbox/modules/payments/gateway/errors.py
