# -*- coding: utf-8 -*-
"""
pitbox/modules/accounts/client.py

Cliente async del servicio de cuentas y suscripciones.

Endpoints cubiertos:
- /auth/register, /auth/login, /auth/me, /auth/change-password, /auth/sessions
- /subscriptions/packages, /subscriptions/subscribe, /subscriptions/status
- /subscriptions/transactions, /subscriptions/tokens, /subscriptions/redeem
- /subscriptions/redeem-history, /subscriptions/premium-content

Los endpoints protegidos envían `Authorization: Bearer <token>` cuando hay
token configurado. Ninguna llamada se reintenta automáticamente.

Autor: PitBox
Fecha: 2026-09-20
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

import httpx
from pydantic import ValidationError as SchemaValidationError

from .errors import (
    AccountServiceError,
    AccountValidationError,
    InvalidCodeError,
    UnauthorizedError,
)
from .schemas import (
    AccessTokenCreate,
    AccessTokenResponse,
    LoginRequest,
    LoginSessionResponse,
    PackageResponse,
    RedeemTokenRequest,
    RedeemTokenResponse,
    SubscribeRequest,
    SubscriptionResponse,
    SubscriptionStatusResponse,
    TokenResponse,
    TransactionResponse,
    UserCreate,
    UserResponse,
    UserUpdatePassword,
)

logger = logging.getLogger(__name__)


def extract_error_detail(response: httpx.Response, default: str) -> str:
    """
    Extrae un mensaje legible de una respuesta de error.

    FastAPI devuelve `detail` como lista de {loc, msg, type} (422) o como
    cadena (400/401/404). Se usa el primer `msg` o la cadena.
    """
    try:
        body = response.json()
    except ValueError:
        return response.text.strip() or default

    detail = body.get("detail") if isinstance(body, dict) else None
    if isinstance(detail, list) and detail:
        first = detail[0]
        if isinstance(first, dict) and first.get("msg"):
            return str(first["msg"])
    if isinstance(detail, str) and detail:
        return detail
    return default


class AccountClient:
    """Cliente tipado del servicio de cuentas."""

    def __init__(self, http: httpx.AsyncClient, token: Optional[str] = None):
        self._http = http
        self._token = token

    # ------------------------------------------------------------------
    # Token
    # ------------------------------------------------------------------

    @property
    def token(self) -> Optional[str]:
        return self._token

    def set_token(self, token: str) -> None:
        self._token = token

    def clear_token(self) -> None:
        self._token = None

    def with_token(self, token: Optional[str]) -> "AccountClient":
        """Copia del cliente ligada a otro token (comparte el pool HTTP)."""
        return AccountClient(self._http, token=token)

    # ------------------------------------------------------------------
    # Núcleo de requests
    # ------------------------------------------------------------------

    async def _request(
        self,
        method: str,
        path: str,
        *,
        secure: bool = False,
        json: Any = None,
        data: Any = None,
        params: Optional[dict] = None,
    ) -> Any:
        headers = {}
        if secure and self._token:
            headers["Authorization"] = f"Bearer {self._token}"

        try:
            response = await self._http.request(
                method, path, json=json, data=data, params=params, headers=headers
            )
        except httpx.HTTPError as e:
            logger.warning(f"Servicio de cuentas inaccesible ({method} {path}): {e}")
            raise AccountServiceError(f"Account service unreachable: {e}") from e

        if response.status_code == 401:
            raise UnauthorizedError()
        if response.status_code in (400, 403, 404, 409, 422):
            message = extract_error_detail(response, f"Request failed ({response.status_code})")
            raise AccountValidationError(message, status_code=response.status_code)
        if response.status_code >= 400:
            message = extract_error_detail(response, f"Account service error ({response.status_code})")
            raise AccountServiceError(message, status_code=response.status_code)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise AccountServiceError(f"Invalid JSON from account service ({path})") from e

    async def _request_model(self, model, method: str, path: str, **kwargs):
        payload = await self._request(method, path, **kwargs)
        try:
            return model.model_validate(payload)
        except SchemaValidationError as e:
            raise AccountServiceError(f"Unexpected response shape from {path}") from e

    async def _request_list(self, model, method: str, path: str, **kwargs) -> list:
        payload = await self._request(method, path, **kwargs)
        try:
            return [model.model_validate(item) for item in payload or []]
        except SchemaValidationError as e:
            raise AccountServiceError(f"Unexpected response shape from {path}") from e

    # ------------------------------------------------------------------
    # Autenticación
    # ------------------------------------------------------------------

    async def register(self, data: UserCreate) -> UserResponse:
        return await self._request_model(
            UserResponse, "POST", "/auth/register", json=data.model_dump()
        )

    async def login(self, data: LoginRequest) -> TokenResponse:
        form = {k: v for k, v in data.model_dump().items() if v is not None}
        return await self._request_model(TokenResponse, "POST", "/auth/login", data=form)

    async def me(self) -> UserResponse:
        return await self._request_model(UserResponse, "GET", "/auth/me", secure=True)

    async def change_password(self, data: UserUpdatePassword) -> Any:
        return await self._request(
            "PUT", "/auth/change-password", secure=True, json=data.model_dump()
        )

    async def sessions(self) -> List[LoginSessionResponse]:
        return await self._request_list(
            LoginSessionResponse, "GET", "/auth/sessions", secure=True
        )

    # ------------------------------------------------------------------
    # Paquetes y suscripciones
    # ------------------------------------------------------------------

    async def list_packages(self) -> List[PackageResponse]:
        return await self._request_list(PackageResponse, "GET", "/subscriptions/packages")

    async def subscribe(self, package_id: str, phone_number: str) -> SubscriptionResponse:
        body = SubscribeRequest(package_id=package_id, phone_number=phone_number)
        return await self._request_model(
            SubscriptionResponse,
            "POST",
            "/subscriptions/subscribe",
            secure=True,
            json=body.model_dump(),
        )

    async def subscription_status(self) -> SubscriptionStatusResponse:
        return await self._request_model(
            SubscriptionStatusResponse, "GET", "/subscriptions/status", secure=True
        )

    async def transactions(self) -> List[TransactionResponse]:
        return await self._request_list(
            TransactionResponse, "GET", "/subscriptions/transactions", secure=True
        )

    async def premium_content(self) -> Any:
        return await self._request("GET", "/subscriptions/premium-content", secure=True)

    # ------------------------------------------------------------------
    # Vouchers
    # ------------------------------------------------------------------

    async def list_access_tokens(self) -> List[AccessTokenResponse]:
        return await self._request_list(
            AccessTokenResponse, "GET", "/subscriptions/tokens", secure=True
        )

    async def create_access_token(self, data: AccessTokenCreate) -> AccessTokenResponse:
        return await self._request_model(
            AccessTokenResponse,
            "POST",
            "/subscriptions/tokens",
            secure=True,
            json=data.model_dump(),
        )

    async def redeem(self, code: str, phone_number: str) -> RedeemTokenResponse:
        """
        Canjea un voucher. El servicio valida el código y crea la
        suscripción de forma atómica; cualquier rechazo es InvalidCodeError.
        """
        body = RedeemTokenRequest(code=code.strip(), phone_number=phone_number)
        try:
            return await self._request_model(
                RedeemTokenResponse,
                "POST",
                "/subscriptions/redeem",
                secure=True,
                json=body.model_dump(),
            )
        except AccountValidationError as e:
            raise InvalidCodeError(e.message or "Invalid or expired code", status_code=e.status_code) from e

    async def redeem_history(self) -> List[Any]:
        return await self._request("GET", "/subscriptions/redeem-history", secure=True) or []


__all__ = ["AccountClient", "extract_error_detail"]

# Fin del archivo pitbox/modules/accounts/client.py
