# -*- coding: utf-8 -*-
"""
pitbox/modules/payments/enums/activation_state_enum.py

Estados del flujo de activación y tipos de fallo.

Autor: PitBox
Fecha: 2026-09-21
"""

from enum import StrEnum


class ActivationState(StrEnum):
    """Estado de una instancia del flujo de activación."""

    IDLE = "idle"
    PROCESSING = "processing"
    CONFIRMING = "confirming"
    SUCCESS = "success"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (ActivationState.SUCCESS, ActivationState.FAILED)


class FailureKind(StrEnum):
    """Sabor del estado 'failed'."""

    INITIALIZATION = "initialization"
    PAYMENT = "payment"
    TIMEOUT = "timeout"
    ACTIVATION = "activation"

    @property
    def retryable(self) -> bool:
        # Reintentar tras un cobro confirmado volvería a cobrar
        return self is not FailureKind.ACTIVATION


class ActivationPath(StrEnum):
    """Camino elegido por la instancia (mutuamente excluyentes)."""

    PAYMENT = "payment"
    REDEMPTION = "redemption"


__all__ = ["ActivationState", "FailureKind", "ActivationPath"]

# Fin del archivo pitbox/modules/payments/enums/activation_state_enum.py
