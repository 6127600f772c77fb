# -*- coding: utf-8 -*-
"""
pitbox/modules/payments/enums/gateway_status_enum.py

Estados reportados por la pasarela y estado local de la transacción.

Autor: PitBox
Fecha: 2026-09-21
"""

from enum import StrEnum
from typing import Optional


class GatewayStatus(StrEnum):
    """Estado de la transacción según la pasarela."""

    PROCESSING = "processing"
    COMPLETED = "completed"
    SUCCESS = "success"
    FAILED = "failed"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["GatewayStatus"]:
        """Devuelve el enum o None si el valor es desconocido."""
        if value is None:
            return None
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


SETTLED_STATUSES = frozenset({GatewayStatus.SUCCESS, GatewayStatus.COMPLETED})


def is_settled(status: Optional[str]) -> bool:
    return GatewayStatus.parse(status) in SETTLED_STATUSES


def is_rejected(status: Optional[str]) -> bool:
    return GatewayStatus.parse(status) is GatewayStatus.FAILED


class TransactionStatus(StrEnum):
    """Estado local de PaymentTransaction."""

    PROCESSING = "processing"
    CONFIRMING = "confirming"
    SUCCESS = "success"
    FAILED = "failed"
    TIMEOUT = "timeout"


__all__ = [
    "GatewayStatus",
    "SETTLED_STATUSES",
    "is_settled",
    "is_rejected",
    "TransactionStatus",
]

# Fin del archivo pitbox/modules/payments/enums/gateway_status_enum.py
