# -*- coding: utf-8 -*-
"""
pitbox/modules/payments/schemas/gateway_schemas.py

Contrato con la pasarela de dinero móvil.

Respuesta típica de initialize / verify:
    {
      "status": "success",
      "message": "...",
      "data": {
        "transaction": {"uuid", "reference", "status", "provider_reference"},
        "collection": {"amount": {"formatted", "raw", "currency"}, "provider", "phone_number"},
        ...
      }
    }

Autor: PitBox
Fecha: 2026-09-21
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class GatewayInitializeRequest(BaseModel):
    """Cuerpo de POST {base}/initialize."""

    amount: float = Field(..., gt=0, description="Importe a cobrar")
    phone_number: str = Field(..., min_length=1, description="Teléfono normalizado (+256...)")
    reference: str = Field(..., min_length=1, description="Referencia única generada por el cliente")
    country: str = Field(..., min_length=2, max_length=2, description="País ISO-3166")
    description: str = Field(..., description="Descripción mostrada al pagador")
    callback_url: str = Field(..., description="URL de notificación de la pasarela")


class GatewayTransaction(BaseModel):
    """Vista normalizada de la transacción devuelta por la pasarela."""

    model_config = ConfigDict(frozen=True)

    transaction_handle: str = Field(..., description="uuid asignado por la pasarela")
    reference: Optional[str] = None
    status: str = Field(..., description="processing | completed | success | failed (u otro)")
    provider_reference: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "GatewayTransaction":
        """
        Extrae la transacción de la respuesta anidada de la pasarela.

        Raises:
            KeyError / TypeError / ValueError si el cuerpo no tiene la forma esperada.
        """
        tx = payload["data"]["transaction"]
        handle = tx["uuid"]
        status = tx["status"]
        if not handle or not status:
            raise ValueError("transaction sin uuid o status")
        return cls(
            transaction_handle=str(handle),
            reference=tx.get("reference"),
            status=str(status),
            provider_reference=tx.get("provider_reference"),
            message=payload.get("message"),
        )


__all__ = ["GatewayInitializeRequest", "GatewayTransaction"]

# Fin del archivo pitbox/modules/payments/schemas/gateway_schemas.py
