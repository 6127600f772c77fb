# -*- coding: utf-8 -*-
"""
pitbox/modules/accounts/errors.py

Excepciones del cliente del servicio de cuentas.

Autor: PitBox
Fecha: 2026-09-20
"""

from typing import Optional


class AccountServiceError(Exception):
    """Error genérico del servicio de cuentas (red, 5xx, cuerpo inválido)."""
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        self.message = message
        super().__init__(message)


class AccountValidationError(AccountServiceError):
    """El servicio rechazó la petición (400/422); message trae el primer detalle."""


class UnauthorizedError(AccountServiceError):
    """Token ausente, inválido o expirado (401)."""
    def __init__(self, message: str = "Session expired. Please login again."):
        super().__init__(message, status_code=401)


class InvalidCodeError(AccountServiceError):
    """Voucher inválido, expirado o agotado."""
    def __init__(self, message: str = "Invalid or expired code", status_code: Optional[int] = None):
        super().__init__(message, status_code=status_code)


__all__ = [
    "AccountServiceError",
    "AccountValidationError",
    "UnauthorizedError",
    "InvalidCodeError",
]

# Fin del archivo pitbox/modules/accounts/errors.py
