# -*- coding: utf-8 -*-
"""
pitbox/modules/payments/facades/activation/__init__.py

Flujo de activación de suscripción: selección de plan, pago por dinero
móvil con confirmación por polling y canje de voucher.

Autor: PitBox
Fecha: 2026-09-23
"""

from .errors import (
    ActivationError,
    ActivationFailure,
    FlowNotFound,
    FlowPathConflict,
    InitializationError,
    PaymentFailure,
    PaymentTimeout,
    SelectionMissing,
    TransientPollError,
)
from .flow import ActivationFlow, new_reference
from .polling import PollPolicy
from .registry import ActivationRegistry
from .selection import (
    active_packages,
    change_plan,
    default_package,
    find_active_package,
    select_plan,
)

__all__ = [
    "ActivationError",
    "ActivationFailure",
    "FlowNotFound",
    "FlowPathConflict",
    "InitializationError",
    "PaymentFailure",
    "PaymentTimeout",
    "SelectionMissing",
    "TransientPollError",
    "ActivationFlow",
    "new_reference",
    "PollPolicy",
    "ActivationRegistry",
    "active_packages",
    "change_plan",
    "default_package",
    "find_active_package",
    "select_plan",
]

# Fin del archivo pitbox/modules/payments/facades/activation/__init__.py
