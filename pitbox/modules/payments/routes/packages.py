# -*- coding: utf-8 -*-
"""
pitbox/modules/payments/routes/packages.py

Catálogo de planes y selección pendiente.

Endpoints:
- GET    /subscriptions/packages
- GET    /subscriptions/selection
- PUT    /subscriptions/selection
- DELETE /subscriptions/selection   (cambiar de plan)

Autor: PitBox
Fecha: 2026-09-26
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status

from pitbox.core.container import PitBoxServices, get_services
from pitbox.modules.accounts import AccountServiceError
from pitbox.modules.payments.context import FlowContext
from pitbox.modules.payments.context.dependencies import get_flow_context
from pitbox.modules.payments.facades.activation import (
    active_packages,
    change_plan,
    default_package,
    find_active_package,
    select_plan,
)
from pitbox.modules.payments.schemas import PendingSelection, SelectPlanRequest

router = APIRouter(tags=["subscriptions:plans"])


async def _load_packages(services: PitBoxServices):
    try:
        return await services.accounts.list_packages()
    except AccountServiceError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message) from e


@router.get("/packages")
async def list_packages(services: PitBoxServices = Depends(get_services)) -> Dict[str, Any]:
    packages = await _load_packages(services)
    default = default_package(packages)
    return {
        "packages": [p.model_dump() for p in active_packages(packages)],
        "default_package_id": default.id if default else None,
    }


@router.get("/selection", response_model=PendingSelection)
async def get_selection(context: FlowContext = Depends(get_flow_context)) -> PendingSelection:
    selection = context.get_selection()
    if selection is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No plan selected")
    return selection


@router.put("/selection", response_model=PendingSelection)
async def put_selection(
    body: SelectPlanRequest,
    context: FlowContext = Depends(get_flow_context),
    services: PitBoxServices = Depends(get_services),
) -> PendingSelection:
    packages = await _load_packages(services)
    package = find_active_package(packages, body.package_id)
    if package is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Package {body.package_id} not found or inactive",
        )
    try:
        return select_plan(
            context,
            package,
            body.phone_number,
            default_currency=services.payments_settings.default_currency,
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)) from e


@router.delete("/selection", status_code=status.HTTP_204_NO_CONTENT)
async def delete_selection(context: FlowContext = Depends(get_flow_context)) -> None:
    change_plan(context)


__all__ = ["router"]

# Fin del archivo pitbox/modules/payments/routes/packages.py
