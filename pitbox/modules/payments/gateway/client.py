# -*- coding: utf-8 -*-
"""
pitbox/modules/payments/gateway/client.py

Cliente async de la pasarela de dinero móvil.

Operaciones:
- initialize(...)  → POST {base}/initialize
- verify(handle)   → GET  {base}/verify/{uuid}

Ninguna llamada se reintenta aquí: el único reintento del sistema es el
propio loop de polling sobre verify().

Autor: PitBox
Fecha: 2026-09-21
"""

from __future__ import annotations

import logging
from typing import Any, Dict

import httpx
from pydantic import ValidationError

from pitbox.shared.config import mask_phone
from ..schemas import GatewayInitializeRequest, GatewayTransaction
from .errors import GatewayError

logger = logging.getLogger(__name__)


class PaymentGatewayClient:
    """Wrapper tipado sobre el API REST de la pasarela."""

    def __init__(self, http: httpx.AsyncClient):
        self._http = http

    async def _call(self, operation: str, method: str, path: str, **kwargs) -> Dict[str, Any]:
        try:
            response = await self._http.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise GatewayError(
                f"Payment gateway unreachable: {e}", operation=operation
            ) from e

        if response.is_error:
            text = response.text.strip()
            raise GatewayError(
                text or f"Failed to {operation} payment: {response.status_code}",
                operation=operation,
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise GatewayError(
                f"Invalid JSON from payment gateway ({operation})",
                operation=operation,
                status_code=response.status_code,
            ) from e
        if not isinstance(payload, dict):
            raise GatewayError(
                f"Unexpected payment gateway response ({operation})",
                operation=operation,
                status_code=response.status_code,
            )
        return payload

    @staticmethod
    def _parse(operation: str, payload: Dict[str, Any]) -> GatewayTransaction:
        try:
            return GatewayTransaction.from_payload(payload)
        except (KeyError, TypeError, ValueError, ValidationError) as e:
            message = payload.get("message") if isinstance(payload.get("message"), str) else None
            raise GatewayError(
                message or f"Malformed payment gateway response ({operation})",
                operation=operation,
            ) from e

    async def initialize(
        self,
        *,
        amount: float,
        phone_number: str,
        reference: str,
        country: str,
        description: str,
        callback_url: str,
    ) -> GatewayTransaction:
        """
        Solicita el cobro por dinero móvil (el pagador recibe un prompt).

        Raises:
            GatewayError: red, rechazo de la pasarela o cuerpo inválido.
        """
        body = GatewayInitializeRequest(
            amount=amount,
            phone_number=phone_number,
            reference=reference,
            country=country,
            description=description,
            callback_url=callback_url,
        )
        logger.info(
            f"💳 Pasarela initialize ref={reference} amount={amount} phone={mask_phone(phone_number)}"
        )
        payload = await self._call("initialize", "POST", "/initialize", json=body.model_dump())
        tx = self._parse("initialize", payload)
        logger.debug(f"Pasarela asignó handle={tx.transaction_handle} status={tx.status}")
        return tx

    async def verify(self, transaction_handle: str) -> GatewayTransaction:
        """
        Consulta el estado de la transacción.

        Raises:
            GatewayError: el flujo lo trata como error transitorio.
        """
        payload = await self._call("verify", "GET", f"/verify/{transaction_handle}")
        return self._parse("verify", payload)


__all__ = ["PaymentGatewayClient"]

# Fin del archivo pitbox/modules/payments/gateway/client.py
