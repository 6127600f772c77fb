# -*- coding: utf-8 -*-
"""
pitbox/modules/accounts/session.py

Fachada de sesión sobre AccountClient + FlowContext.

Responsabilidades:
1. login: obtiene token, lo persiste y sincroniza el perfil
2. restore: rehidrata la sesión desde el token persistido
3. logout: borra token y flag premium (opcionalmente por expiración)
4. handle_unauthorized: un 401 global cierra la sesión activa

El flag premium se deriva siempre de `subscribed` en /auth/me.

Autor: PitBox
Fecha: 2026-09-22
"""

from __future__ import annotations

import logging
from typing import Optional

from pitbox.modules.payments.context import FlowContext
from .client import AccountClient
from .errors import AccountServiceError, UnauthorizedError
from .schemas import LoginRequest, UserCreate, UserResponse

logger = logging.getLogger(__name__)


class AuthSession:
    """Estado de autenticación de un cliente."""

    def __init__(self, client: AccountClient, context: FlowContext):
        self._client = client
        self._context = context
        self.user: Optional[UserResponse] = None
        self.expired_notice: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return self._client.token is not None

    @property
    def client(self) -> AccountClient:
        return self._client

    async def _sync_profile(self) -> UserResponse:
        user = await self._client.me()
        self.user = user
        self._context.set_premium(bool(user.subscribed))
        return user

    async def login(self, username: str, password: str) -> UserResponse:
        """
        Inicia sesión y sincroniza el perfil.

        Raises:
            AccountValidationError / UnauthorizedError: credenciales rechazadas.
        """
        token = await self._client.login(LoginRequest(username=username, password=password))
        self._context.set_token(token.access_token)
        self._client.set_token(token.access_token)
        try:
            user = await self._sync_profile()
        except AccountServiceError:
            logger.warning("Sincronización de perfil falló tras login, se cierra la sesión")
            self.logout()
            raise
        logger.info(f"Sesión iniciada para {user.username}")
        return user

    async def register(self, email: str, password: str) -> UserResponse:
        """Crea la cuenta; el usuario debe iniciar sesión después."""
        user = await self._client.register(UserCreate(email=email, password=password))
        logger.info(f"Cuenta creada: {user.id}")
        return user

    async def restore(self) -> Optional[UserResponse]:
        """
        Rehidrata la sesión desde el token persistido.

        Si el perfil no se puede obtener (token caducado, red) se cierra
        la sesión y se devuelve None.
        """
        token = self._context.get_token()
        if not token:
            return None
        self._client.set_token(token)
        try:
            return await self._sync_profile()
        except AccountServiceError as e:
            logger.warning(f"Restauración de sesión fallida: {e}")
            self.logout(session_expired=isinstance(e, UnauthorizedError))
            return None

    def logout(self, session_expired: bool = False) -> None:
        self._client.clear_token()
        self._context.clear_session()
        self.user = None
        self.expired_notice = UnauthorizedError().message if session_expired else None
        if session_expired:
            logger.info("Sesión expirada, token eliminado")

    def handle_unauthorized(self) -> None:
        """Reacción a un 401 de cualquier endpoint protegido."""
        if self.is_authenticated:
            self.logout(session_expired=True)


__all__ = ["AuthSession"]

# Fin del archivo pitbox/modules/accounts/session.py
