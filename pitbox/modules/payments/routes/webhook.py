# -*- coding: utf-8 -*-
"""
pitbox/modules/payments/routes/webhook.py

Callback de la pasarela de dinero móvil.

Endpoint:
- POST /payments/webhook

El estado notificado entra por el mismo camino que el polling
(ActivationFlow.apply_gateway_status), así que una carrera entre
callback y poll crea la suscripción como mucho una vez.

Autor: PitBox
Fecha: 2026-09-26
"""

from __future__ import annotations

import hmac
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Header, HTTPException, status
from fastapi.responses import JSONResponse

from pitbox.core.container import PitBoxServices, get_services
from pitbox.modules.payments.schemas import GatewayWebhookPayload

logger = logging.getLogger(__name__)

router = APIRouter(tags=["payments:webhook"])


def _check_secret(expected: Optional[str], received: Optional[str]) -> None:
    if not expected:
        return
    if not received or not hmac.compare_digest(expected, received):
        logger.warning("Webhook de pasarela rechazado: secreto inválido")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid webhook secret")


@router.post("/webhook")
async def gateway_webhook(
    payload: GatewayWebhookPayload,
    x_webhook_secret: Optional[str] = Header(default=None, alias="X-Webhook-Secret"),
    services: PitBoxServices = Depends(get_services),
) -> Dict[str, Any]:
    _check_secret(services.payments_settings.webhook_shared_secret, x_webhook_secret)

    fields = payload.transaction_fields()
    if not fields["status"] or not (fields["reference"] or fields["uuid"]):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Webhook payload needs a status and a reference or uuid",
        )

    flow = services.registry.find_by_transaction(
        reference=fields["reference"],
        transaction_handle=fields["uuid"],
    )
    if flow is None:
        logger.info(
            f"Webhook sin flujo activo ref={fields['reference']} uuid={fields['uuid']} "
            f"status={fields['status']}"
        )
        return JSONResponse(status_code=status.HTTP_202_ACCEPTED, content={"status": "ignored"})

    state = await flow.apply_gateway_status(fields["status"], source="webhook")
    return {"status": "processed", "flow_id": flow.flow_id, "state": state.value}


__all__ = ["router"]

# Fin del archivo pitbox/modules/payments/routes/webhook.py
