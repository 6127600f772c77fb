# -*- coding: utf-8 -*-
"""
pitbox/modules/payments/schemas/selection_schemas.py

Plan elegido pendiente de pago (PendingSelection).

Se crea al seleccionar un plan, lo lee el flujo de activación y se
borra tras una activación exitosa o un cambio de plan explícito.

Autor: PitBox
Fecha: 2026-09-21
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class PendingSelection(BaseModel):
    """Selección de plan persistida en el contexto de flujo."""

    package_id: str = Field(default="", description="ID del paquete elegido")
    package_name: str = Field(default="", description="Nombre mostrado del plan")
    price: float = Field(default=0.0, ge=0, description="Precio del plan")
    currency: str = Field(default="UGX", description="Moneda del plan")
    duration_days: Optional[int] = Field(default=None, description="Duración en días")
    phone_number: str = Field(default="", description="Teléfono normalizado del pagador")

    @property
    def is_complete(self) -> bool:
        """El flujo solo arranca con package_id y phone_number no vacíos."""
        return bool(self.package_id.strip()) and bool(self.phone_number.strip())


class SelectPlanRequest(BaseModel):
    """Cuerpo de PUT /subscriptions/selection."""

    package_id: str = Field(..., min_length=1)
    phone_number: str = Field(..., min_length=1)


__all__ = ["PendingSelection", "SelectPlanRequest"]

# Fin del archivo pitbox/modules/payments/schemas/selection_schemas.py
