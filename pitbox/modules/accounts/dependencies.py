# -*- coding: utf-8 -*-
"""
pitbox/modules/accounts/dependencies.py

Resolución del token del servicio de cuentas para cada request.

Orden: cabecera `Authorization: Bearer <token>`; si falta, el token
persistido en el contexto del cliente (tras POST /auth/login).

Autor: PitBox
Fecha: 2026-09-26
"""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, Header, HTTPException, status

from pitbox.modules.payments.context import FlowContext
from pitbox.modules.payments.context.dependencies import get_flow_context


def get_optional_token(
    authorization: Optional[str] = Header(default=None, alias="Authorization"),
    context: FlowContext = Depends(get_flow_context),
) -> Optional[str]:
    if authorization:
        scheme, _, token = authorization.partition(" ")
        if scheme.lower() != "bearer" or not token.strip():
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Authorization header must be 'Bearer <token>'",
                headers={"WWW-Authenticate": "Bearer"},
            )
        return token.strip()
    return context.get_token()


def require_token(token: Optional[str] = Depends(get_optional_token)) -> str:
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return token


__all__ = ["get_optional_token", "require_token"]

# Fin del archivo pitbox/modules/accounts/dependencies.py
