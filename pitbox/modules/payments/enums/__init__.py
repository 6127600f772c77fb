# -*- coding: utf-8 -*-
"""
pitbox/modules/payments/enums/__init__.py

Superficie de exportación de enums del módulo Payments.

Autor: PitBox
Fecha: 2026-09-21
"""

from .activation_state_enum import ActivationPath, ActivationState, FailureKind
from .gateway_status_enum import (
    GatewayStatus,
    TransactionStatus,
    is_rejected,
    is_settled,
)
from .activation_transitions import (
    VALID_ACTIVATION_TRANSITIONS,
    get_allowed_activation_transitions,
    is_valid_activation_transition,
    validate_activation_transition,
)

__all__ = [
    "ActivationPath",
    "ActivationState",
    "FailureKind",
    "GatewayStatus",
    "TransactionStatus",
    "is_rejected",
    "is_settled",
    "VALID_ACTIVATION_TRANSITIONS",
    "get_allowed_activation_transitions",
    "is_valid_activation_transition",
    "validate_activation_transition",
]

# Fin del archivo pitbox/modules/payments/enums/__init__.py
