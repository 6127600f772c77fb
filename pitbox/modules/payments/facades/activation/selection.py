# -*- coding: utf-8 -*-
"""
pitbox/modules/payments/facades/activation/selection.py

Paso previo al flujo: elección de plan y teléfono del pagador.

- active_packages: solo paquetes activos, en el orden del servicio
- default_package: el segundo activo (el "más popular") si hay más de uno
- select_plan: normaliza el teléfono y persiste la PendingSelection
- change_plan: borra la selección (volver a elegir plan)

Autor: PitBox
Fecha: 2026-09-23
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from pitbox.modules.accounts.schemas import PackageResponse
from pitbox.modules.payments.context import FlowContext
from pitbox.modules.payments.schemas import PendingSelection
from pitbox.shared.config import mask_phone
from pitbox.shared.utils import normalize_ug_phone

logger = logging.getLogger(__name__)


def active_packages(packages: Iterable[PackageResponse]) -> List[PackageResponse]:
    return [p for p in packages if p.is_active]


def default_package(packages: Iterable[PackageResponse]) -> Optional[PackageResponse]:
    active = active_packages(packages)
    if not active:
        return None
    return active[1] if len(active) > 1 else active[0]


def find_active_package(
    packages: Iterable[PackageResponse],
    package_id: str,
) -> Optional[PackageResponse]:
    return next((p for p in active_packages(packages) if p.id == package_id), None)


def select_plan(
    context: FlowContext,
    package: PackageResponse,
    phone_number: str,
    *,
    default_currency: str = "UGX",
) -> PendingSelection:
    """
    Persiste la selección de plan con el teléfono normalizado.

    Raises:
        ValueError: si el teléfono queda vacío tras normalizar.
    """
    phone = normalize_ug_phone(phone_number)
    if not phone:
        raise ValueError("Please enter your phone number")

    selection = PendingSelection(
        package_id=package.id,
        package_name=package.name,
        price=package.price,
        currency=package.currency or default_currency,
        duration_days=package.duration_days,
        phone_number=phone,
    )
    context.set_selection(selection)
    logger.info(
        f"Plan seleccionado '{package.name}' ({package.id}) phone={mask_phone(phone)} "
        f"ns={context.namespace}"
    )
    return selection


def change_plan(context: FlowContext) -> None:
    context.clear_selection()
    logger.debug(f"Selección de plan borrada ns={context.namespace}")


__all__ = [
    "active_packages",
    "default_package",
    "find_active_package",
    "select_plan",
    "change_plan",
]

# Fin del archivo pitbox/modules/payments/facades/activation/selection.py
