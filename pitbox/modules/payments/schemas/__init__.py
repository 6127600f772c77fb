# -*- coding: utf-8 -*-
"""
pitbox/modules/payments/schemas/__init__.py

Autor: PitBox
Fecha: 2026-09-21
"""

from .gateway_schemas import GatewayInitializeRequest, GatewayTransaction
from .selection_schemas import PendingSelection, SelectPlanRequest
from .activation_schemas import (
    ActivationSnapshot,
    GatewayWebhookPayload,
    PaymentTransaction,
    RedeemRequest,
)

__all__ = [
    "GatewayInitializeRequest",
    "GatewayTransaction",
    "PendingSelection",
    "SelectPlanRequest",
    "ActivationSnapshot",
    "GatewayWebhookPayload",
    "PaymentTransaction",
    "RedeemRequest",
]

# Fin del archivo pitbox/modules/payments/schemas/__init__.py
