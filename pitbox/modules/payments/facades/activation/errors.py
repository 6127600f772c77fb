# -*- coding: utf-8 -*-
"""
pitbox/modules/payments/facades/activation/errors.py

Taxonomía de errores del flujo de activación.

Errores terminales (ActivationError):
- InitializationError: la pasarela rechazó o no respondió a initialize
- PaymentFailure:      la pasarela reportó 'failed'
- PaymentTimeout:      sin estado terminal dentro de la ventana de confirmación
- ActivationFailure:   pago liquidado pero subscribe falló (NO reintentable)

No terminal:
- TransientPollError: un verify() falló; se registra y el polling continúa

Errores de uso del flujo:
- SelectionMissing, FlowPathConflict, FlowNotFound

Autor: PitBox
Fecha: 2026-09-23
"""

from __future__ import annotations

from typing import Optional

from pitbox.modules.payments.enums import FailureKind


SUPPORT_HINT = "Please contact support."


class ActivationError(Exception):
    """
    Fallo terminal del flujo.

    Attributes:
        kind: tipo de fallo
        message: mensaje corto para el usuario
        detail: mensaje técnico de origen (pasarela / servicio de cuentas)
        retryable: si "intentar de nuevo" está permitido
        contact_support: si se debe aconsejar contactar a soporte
    """

    kind: FailureKind
    contact_support: bool = False

    def __init__(self, message: str, detail: Optional[str] = None):
        self.message = message
        self.detail = detail
        super().__init__(message)

    @property
    def retryable(self) -> bool:
        return self.kind.retryable


class InitializationError(ActivationError):
    kind = FailureKind.INITIALIZATION

    def __init__(self, detail: Optional[str] = None):
        super().__init__(detail or "Could not start the payment. Please try again.", detail)


class PaymentFailure(ActivationError):
    kind = FailureKind.PAYMENT

    def __init__(self, detail: Optional[str] = None):
        super().__init__("Payment failed. No subscription was created.", detail)


class PaymentTimeout(ActivationError):
    kind = FailureKind.TIMEOUT
    contact_support = True

    def __init__(self, timeout_seconds: float):
        self.timeout_seconds = timeout_seconds
        super().__init__(
            f"Payment confirmation timed out after {int(timeout_seconds)} seconds. "
            "If you were charged, please contact support."
        )


class ActivationFailure(ActivationError):
    kind = FailureKind.ACTIVATION
    contact_support = True

    def __init__(self, detail: Optional[str] = None):
        reason = f" ({detail})" if detail else ""
        super().__init__(
            f"Payment succeeded but activation failed{reason}. "
            f"{SUPPORT_HINT} Do not pay again.",
            detail,
        )


class TransientPollError(Exception):
    """verify() falló de forma transitoria; nunca se muestra al usuario."""

    def __init__(self, transaction_handle: str, reason: str):
        self.transaction_handle = transaction_handle
        self.reason = reason
        super().__init__(f"verify({transaction_handle}) falló: {reason}")


class SelectionMissing(Exception):
    """No hay plan pendiente completo; el usuario debe volver a elegir plan."""

    def __init__(self, message: str = "No plan selected. Please choose a plan first."):
        self.message = message
        super().__init__(message)


class FlowPathConflict(Exception):
    """Se intentó mezclar pago y canje en la misma instancia."""

    def __init__(self, flow_id: str, active_path: str, requested_path: str):
        self.flow_id = flow_id
        self.active_path = active_path
        self.requested_path = requested_path
        super().__init__(
            f"Flow {flow_id} already uses the {active_path} path; "
            f"cannot switch to {requested_path}"
        )


class FlowNotFound(Exception):
    def __init__(self, flow_id: str):
        self.flow_id = flow_id
        super().__init__(f"Activation flow not found: {flow_id}")


__all__ = [
    "ActivationError",
    "InitializationError",
    "PaymentFailure",
    "PaymentTimeout",
    "ActivationFailure",
    "TransientPollError",
    "SelectionMissing",
    "FlowPathConflict",
    "FlowNotFound",
]

# Fin del archivo pitbox/modules/payments/facades/activation/errors.py
