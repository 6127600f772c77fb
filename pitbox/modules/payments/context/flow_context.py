# -*- coding: utf-8 -*-
"""
pitbox/modules/payments/context/flow_context.py

Contexto de flujo tipado sobre el almacén clave/valor.

Cada cliente (cabecera X-Client-Id) tiene su propio namespace. Se
guardan tres cosas:
- la selección de plan pendiente (PendingSelection)
- el token de sesión del servicio de cuentas
- el flag "premium"

Contrato de borrado:
- clear_selection(): solo tras activación confirmada o cambio de plan
- clear_session(): logout o sesión expirada

Autor: PitBox
Fecha: 2026-09-22
"""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import ValidationError

from pitbox.shared.storage import KeyValueStore
from ..schemas import PendingSelection

logger = logging.getLogger(__name__)

SELECTION_KEY = "pending_selection"
TOKEN_KEY = "token"
PREMIUM_KEY = "premium"

DEFAULT_NAMESPACE = "default"


class FlowContext:
    """Acceso tipado al estado persistido de un cliente."""

    def __init__(self, store: KeyValueStore, namespace: str = DEFAULT_NAMESPACE):
        self._store = store
        self.namespace = (namespace or DEFAULT_NAMESPACE).strip() or DEFAULT_NAMESPACE

    def _key(self, name: str) -> str:
        return f"pitbox:{self.namespace}:{name}"

    # ------------------------------------------------------------------
    # Selección pendiente
    # ------------------------------------------------------------------

    def get_selection(self) -> Optional[PendingSelection]:
        raw = self._store.get(self._key(SELECTION_KEY))
        if not isinstance(raw, dict):
            return None
        try:
            return PendingSelection.model_validate(raw)
        except ValidationError as e:
            logger.warning(f"Selección pendiente corrupta en '{self.namespace}', se ignora: {e}")
            return None

    def set_selection(self, selection: PendingSelection) -> None:
        self._store.set(self._key(SELECTION_KEY), selection.model_dump())

    def clear_selection(self) -> None:
        self._store.remove(self._key(SELECTION_KEY))

    # ------------------------------------------------------------------
    # Sesión
    # ------------------------------------------------------------------

    def get_token(self) -> Optional[str]:
        token = self._store.get(self._key(TOKEN_KEY))
        return token if isinstance(token, str) and token else None

    def set_token(self, token: str) -> None:
        self._store.set(self._key(TOKEN_KEY), token)

    def is_premium(self) -> bool:
        return self._store.get(self._key(PREMIUM_KEY)) is True

    def set_premium(self, premium: bool) -> None:
        self._store.set(self._key(PREMIUM_KEY), bool(premium))

    def clear_session(self) -> None:
        self._store.clear_group([self._key(TOKEN_KEY), self._key(PREMIUM_KEY)])


__all__ = ["FlowContext", "DEFAULT_NAMESPACE"]

# Fin del archivo pitbox/modules/payments/context/flow_context.py
