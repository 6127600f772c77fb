# -*- coding: utf-8 -*-
"""
pitbox/modules/payments/schemas/activation_schemas.py

DTOs del flujo de activación: transacción local, instantánea del
flujo expuesta por HTTP, canje de voucher y callback de la pasarela.

Autor: PitBox
Fecha: 2026-09-22
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..enums import ActivationPath, ActivationState, FailureKind, TransactionStatus


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PaymentTransaction(BaseModel):
    """
    Transacción de pago en memoria (no se persiste).

    Se crea al iniciar el flujo y solo cambia por respuestas de la pasarela.
    """

    model_config = ConfigDict(validate_assignment=True)

    reference: str = Field(..., description="Referencia única generada por el cliente")
    uuid: Optional[str] = Field(default=None, description="Handle asignado por la pasarela")
    status: TransactionStatus = TransactionStatus.PROCESSING
    amount: float
    phone_number: str
    created_at: datetime = Field(default_factory=_utcnow)


class ActivationSnapshot(BaseModel):
    """Estado observable de una instancia del flujo."""

    flow_id: str
    state: ActivationState
    path: Optional[ActivationPath] = None
    failure_kind: Optional[FailureKind] = None
    message: Optional[str] = Field(default=None, description="Mensaje para el usuario")
    retryable: bool = False
    contact_support: bool = False
    notices: list[str] = Field(default_factory=list)
    transaction: Optional[PaymentTransaction] = None
    subscription_id: Optional[str] = None
    package_id: Optional[str] = None
    package_name: Optional[str] = None


class RedeemRequest(BaseModel):
    """Cuerpo de POST /subscriptions/redeem."""

    code: str = Field(..., min_length=1)
    phone_number: Optional[str] = Field(
        default=None, description="Si falta se usa el de la selección pendiente"
    )


class GatewayWebhookPayload(BaseModel):
    """
    Notificación de la pasarela. Acepta la forma anidada de la pasarela
    (data.transaction) o una forma plana {reference, uuid, status}.
    """

    model_config = ConfigDict(extra="allow")

    reference: Optional[str] = None
    uuid: Optional[str] = None
    status: Optional[str] = None
    data: Optional[Dict[str, Any]] = None

    def transaction_fields(self) -> Dict[str, Optional[str]]:
        tx = (self.data or {}).get("transaction") or {}
        return {
            "reference": self.reference or tx.get("reference"),
            "uuid": self.uuid or tx.get("uuid"),
            "status": tx.get("status") or self.status,
        }


__all__ = [
    "PaymentTransaction",
    "ActivationSnapshot",
    "RedeemRequest",
    "GatewayWebhookPayload",
]

# Fin del archivo pitbox/modules/payments/schemas/activation_schemas.py
