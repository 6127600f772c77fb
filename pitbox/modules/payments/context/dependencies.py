# -*- coding: utf-8 -*-
"""
pitbox/modules/payments/context/dependencies.py

Dependencias FastAPI para resolver el contexto de flujo del cliente.

- X-Client-Id: namespace del contexto de flujo (un navegador/dispositivo)
- FlowContext del cliente sobre el almacén configurado

Autor: PitBox
Fecha: 2026-09-26
"""

from __future__ import annotations

import re
from typing import Optional

from fastapi import Depends, Header, HTTPException, status

from pitbox.core.container import PitBoxServices, get_services
from pitbox.modules.payments.context import DEFAULT_NAMESPACE, FlowContext

_CLIENT_ID_RE = re.compile(r"^[A-Za-z0-9_.-]{1,64}$")


def get_client_namespace(
    x_client_id: Optional[str] = Header(default=None, alias="X-Client-Id"),
) -> str:
    if x_client_id is None or not x_client_id.strip():
        return DEFAULT_NAMESPACE
    client_id = x_client_id.strip()
    if not _CLIENT_ID_RE.match(client_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="X-Client-Id must be 1-64 characters of letters, digits, '.', '_' or '-'",
        )
    return client_id


def get_flow_context(
    namespace: str = Depends(get_client_namespace),
    services: PitBoxServices = Depends(get_services),
) -> FlowContext:
    return services.flow_context(namespace)


__all__ = ["get_client_namespace", "get_flow_context"]

# Fin del archivo pitbox/modules/payments/context/dependencies.py
