# -*- coding: utf-8 -*-
"""
pitbox/modules/payments/routes/activations.py

Flujo de activación por HTTP.

Endpoints:
- POST   /subscriptions/activations                 → start (initialize + polling)
- GET    /subscriptions/activations/{flow_id}       → instantánea
- POST   /subscriptions/activations/{flow_id}/retry → reintento
- DELETE /subscriptions/activations/{flow_id}       → cancelar y abandonar
- POST   /subscriptions/redeem                      → canje de voucher

El flujo de pago sigue en segundo plano después de responder; el
cliente consulta GET /activations/{flow_id} hasta un estado terminal.

Autor: PitBox
Fecha: 2026-09-26
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from pitbox.core.container import PitBoxServices, get_services
from pitbox.modules.accounts import (
    AccountServiceError,
    InvalidCodeError,
    UnauthorizedError,
)
from pitbox.modules.accounts.dependencies import require_token
from pitbox.modules.payments.context import FlowContext
from pitbox.modules.payments.context.dependencies import get_client_namespace, get_flow_context
from pitbox.modules.payments.facades.activation import (
    ActivationFlow,
    FlowNotFound,
    FlowPathConflict,
    SelectionMissing,
)
from pitbox.modules.payments.schemas import ActivationSnapshot, RedeemRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["subscriptions:activation"])

SELECTION_PATH = "/subscriptions/selection"


def _selection_missing(e: SelectionMissing) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail={"message": e.message, "redirect": SELECTION_PATH},
    )


def _get_flow(services: PitBoxServices, flow_id: str, namespace: str) -> ActivationFlow:
    try:
        return services.registry.get(flow_id, namespace=namespace)
    except FlowNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


def _require_payments(services: PitBoxServices) -> None:
    if not services.payments_settings.payments_enabled:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Payments are disabled")


@router.post(
    "/activations",
    response_model=ActivationSnapshot,
    status_code=status.HTTP_201_CREATED,
)
async def start_activation(
    token: str = Depends(require_token),
    context: FlowContext = Depends(get_flow_context),
    services: PitBoxServices = Depends(get_services),
) -> ActivationSnapshot:
    _require_payments(services)
    flow = services.registry.add(services.new_flow(context, token))
    try:
        snapshot = await flow.start()
    except SelectionMissing as e:
        services.registry.remove(flow.flow_id)
        raise _selection_missing(e) from e

    services.registry.track(flow)
    return snapshot


@router.get("/activations/{flow_id}", response_model=ActivationSnapshot)
async def get_activation(
    flow_id: str,
    namespace: str = Depends(get_client_namespace),
    services: PitBoxServices = Depends(get_services),
) -> ActivationSnapshot:
    return _get_flow(services, flow_id, namespace).snapshot()


@router.post("/activations/{flow_id}/retry", response_model=ActivationSnapshot)
async def retry_activation(
    flow_id: str,
    namespace: str = Depends(get_client_namespace),
    services: PitBoxServices = Depends(get_services),
) -> ActivationSnapshot:
    _require_payments(services)
    flow = _get_flow(services, flow_id, namespace)
    try:
        snapshot = await flow.retry()
    except SelectionMissing as e:
        raise _selection_missing(e) from e
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    services.registry.track(flow)
    return snapshot


@router.delete("/activations/{flow_id}", status_code=status.HTTP_204_NO_CONTENT)
async def abandon_activation(
    flow_id: str,
    namespace: str = Depends(get_client_namespace),
    services: PitBoxServices = Depends(get_services),
) -> None:
    flow = _get_flow(services, flow_id, namespace)
    flow.abandon()
    services.registry.remove(flow_id)


@router.post("/redeem", response_model=ActivationSnapshot)
async def redeem_code(
    body: RedeemRequest,
    token: str = Depends(require_token),
    context: FlowContext = Depends(get_flow_context),
    services: PitBoxServices = Depends(get_services),
) -> ActivationSnapshot:
    if not services.payments_settings.redemption_enabled:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Redemption is disabled")

    flow = services.new_flow(context, token)
    try:
        snapshot = await flow.redeem(body.code, body.phone_number)
    except SelectionMissing as e:
        raise _selection_missing(e) from e
    except (FlowPathConflict, ValueError) as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    except InvalidCodeError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    except UnauthorizedError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message) from e
    except AccountServiceError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message) from e

    services.registry.add(flow)
    return snapshot


__all__ = ["router"]

# Fin del archivo pitbox/modules/payments/routes/activations.py
