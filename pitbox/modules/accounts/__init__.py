# -*- coding: utf-8 -*-
"""
pitbox/modules/accounts/__init__.py

Cliente del servicio externo de cuentas y suscripciones.

Autor: PitBox
Fecha: 2026-09-20
"""

from .client import AccountClient, extract_error_detail
from .errors import (
    AccountServiceError,
    AccountValidationError,
    InvalidCodeError,
    UnauthorizedError,
)
from .session import AuthSession

__all__ = [
    "AccountClient",
    "extract_error_detail",
    "AccountServiceError",
    "AccountValidationError",
    "InvalidCodeError",
    "UnauthorizedError",
    "AuthSession",
]

# Fin del archivo pitbox/modules/accounts/__init__.py
