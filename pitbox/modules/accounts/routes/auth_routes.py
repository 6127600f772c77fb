# -*- coding: utf-8 -*-
"""
pitbox/modules/accounts/routes/auth_routes.py

Sesión del cliente frente al servicio de cuentas.

Endpoints:
- POST /auth/register
- POST /auth/login      → persiste el token en el contexto del cliente
- GET  /auth/me         → rehidrata la sesión (cierra si el token caducó)
- POST /auth/logout

Autor: PitBox
Fecha: 2026-09-26
"""

from __future__ import annotations

from typing import Any, Dict, NoReturn

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from pitbox.core.container import PitBoxServices, get_services
from pitbox.modules.accounts.errors import (
    AccountServiceError,
    AccountValidationError,
    UnauthorizedError,
)
from pitbox.modules.payments.context import FlowContext
from pitbox.modules.payments.context.dependencies import get_flow_context

router = APIRouter(prefix="/auth", tags=["auth"])


class LoginBody(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class RegisterBody(BaseModel):
    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=1)


def _raise_for(e: AccountServiceError) -> NoReturn:
    if isinstance(e, UnauthorizedError):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message) from e
    if isinstance(e, AccountValidationError):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message) from e


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    body: RegisterBody,
    context: FlowContext = Depends(get_flow_context),
    services: PitBoxServices = Depends(get_services),
) -> Dict[str, Any]:
    session = services.auth_session(context)
    try:
        user = await session.register(body.email, body.password)
    except AccountServiceError as e:
        _raise_for(e)
    return {"user": user.model_dump(), "message": "Account created! Please sign in."}


@router.post("/login")
async def login(
    body: LoginBody,
    context: FlowContext = Depends(get_flow_context),
    services: PitBoxServices = Depends(get_services),
) -> Dict[str, Any]:
    session = services.auth_session(context)
    try:
        user = await session.login(body.username, body.password)
    except AccountValidationError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message or "Login failed") from e
    except AccountServiceError as e:
        _raise_for(e)
    return {
        "user": user.model_dump(),
        "premium": context.is_premium(),
        "access_token": session.client.token,
        "token_type": "bearer",
    }


@router.get("/me")
async def me(
    context: FlowContext = Depends(get_flow_context),
    services: PitBoxServices = Depends(get_services),
) -> Dict[str, Any]:
    session = services.auth_session(context)
    user = await session.restore()
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=session.expired_notice or "Not authenticated",
        )
    return {"user": user.model_dump(), "premium": context.is_premium()}


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    context: FlowContext = Depends(get_flow_context),
    services: PitBoxServices = Depends(get_services),
) -> None:
    services.auth_session(context).logout()


__all__ = ["router"]

# Fin del archivo pitbox/modules/accounts/routes/auth_routes.py
