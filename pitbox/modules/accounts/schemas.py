# -*- coding: utf-8 -*-
"""
pitbox/modules/accounts/schemas.py

Modelos Pydantic del servicio de cuentas y suscripciones.
Reflejan el contrato OpenAPI del servicio externo; los campos
desconocidos se ignoran para tolerar versiones nuevas de la API.

Autor: PitBox
Fecha: 2026-09-20
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _ApiModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


# ---------------------------------------------------------------------------
# Autenticación
# ---------------------------------------------------------------------------

class UserCreate(_ApiModel):
    email: str
    password: str


class LoginRequest(_ApiModel):
    """Formulario OAuth2 password grant (se envía url-encoded)."""
    username: str
    password: str
    grant_type: Optional[str] = "password"
    scope: str = ""
    client_id: Optional[str] = None
    client_secret: Optional[str] = None


class TokenResponse(_ApiModel):
    access_token: str
    token_type: str = "bearer"


class UserResponse(_ApiModel):
    id: str
    email: str
    username: str
    subscribed: Optional[bool] = None


class UserUpdatePassword(_ApiModel):
    old_password: str
    new_password: str


class LoginSessionResponse(_ApiModel):
    id: str
    user_id: str
    ip_address: Optional[str] = None
    device: Optional[str] = None
    browser: Optional[str] = None
    os: Optional[str] = None
    user_agent_raw: Optional[str] = None
    created_at: datetime
    is_active: bool


# ---------------------------------------------------------------------------
# Paquetes y suscripciones
# ---------------------------------------------------------------------------

class PackageResponse(_ApiModel):
    id: str
    name: str
    price: float
    currency: str = "UGX"
    duration_days: int
    description: Optional[str] = None
    is_active: bool = True


class SubscribeRequest(_ApiModel):
    package_id: str
    phone_number: str


class SubscriptionResponse(_ApiModel):
    id: str
    user_id: str
    package: Optional[PackageResponse] = None
    phone_number: str
    start_date: datetime
    end_date: datetime
    is_active: bool
    created_at: Optional[datetime] = None

    @property
    def package_id(self) -> Optional[str]:
        return self.package.id if self.package else None


class SubscriptionStatusResponse(_ApiModel):
    is_subscribed: bool
    subscription: Optional[SubscriptionResponse] = None
    message: str = ""


class TransactionResponse(_ApiModel):
    id: str
    user_id: str
    package_id: Optional[str] = None
    phone_number: Optional[str] = None
    amount: Optional[float] = 0
    currency: str
    transaction_type: str
    description: str
    details: Optional[str] = None
    status: str
    created_at: datetime


# ---------------------------------------------------------------------------
# Vouchers (códigos de canje)
# ---------------------------------------------------------------------------

class AccessTokenCreate(_ApiModel):
    package_id: str
    max_uses: int = Field(default=1, ge=1)
    duration_days: int = Field(default=7, ge=1)


class AccessTokenResponse(_ApiModel):
    id: str
    code: str
    package: PackageResponse
    max_uses: int
    times_used: int
    expires_at: datetime
    is_active: bool
    created_at: datetime


class RedeemTokenRequest(_ApiModel):
    code: str
    phone_number: str


class RedeemTokenResponse(_ApiModel):
    message: str
    subscription: SubscriptionResponse


class ValidationErrorItem(_ApiModel):
    loc: List[Any] = Field(default_factory=list)
    msg: str
    type: str = ""


__all__ = [
    "UserCreate",
    "LoginRequest",
    "TokenResponse",
    "UserResponse",
    "UserUpdatePassword",
    "LoginSessionResponse",
    "PackageResponse",
    "SubscribeRequest",
    "SubscriptionResponse",
    "SubscriptionStatusResponse",
    "TransactionResponse",
    "AccessTokenCreate",
    "AccessTokenResponse",
    "RedeemTokenRequest",
    "RedeemTokenResponse",
    "ValidationErrorItem",
]

# Fin del archivo pitbox/modules/accounts/schemas.py
