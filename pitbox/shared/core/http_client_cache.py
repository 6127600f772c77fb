# -*- coding: utf-8 -*-
"""
pitbox/shared/core/http_client_cache.py

Gestión de los clientes HTTP compartidos (uno por servicio externo).

Cada servicio (catálogo, cuentas, pasarela) tiene su propio
httpx.AsyncClient con base_url, User-Agent identificable y su política
de reintentos de transporte. La pasarela se crea con retries=0: las
llamadas initialize/verify nunca se reintentan automáticamente.

Autor: PitBox
Fecha: 2026-09-16
"""

from __future__ import annotations

import asyncio
import logging
from typing import Dict, Optional

import httpx

from pitbox.shared.config import get_settings

logger = logging.getLogger(__name__)

# Lock async para evitar creación concurrente de clientes
_http_client_lock = asyncio.Lock()
_clients: Dict[str, httpx.AsyncClient] = {}


def build_http_client(
    base_url: str,
    *,
    retries: Optional[int] = None,
    timeout: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """
    Construye un httpx.AsyncClient configurado para un servicio externo.

    Args:
        base_url: URL base del servicio
        retries: Reintentos de conexión del transporte (None = settings)
        timeout: Timeout de lectura en segundos (None = settings)
        transport: Transporte alternativo (tests: httpx.MockTransport)
    """
    settings = get_settings()

    headers = {
        "User-Agent": f"{settings.app_name}/{settings.app_version}",
        "Accept": "application/json",
        **(settings.http_extra_headers or {}),
    }

    read_timeout = timeout if timeout is not None else settings.http_read_timeout
    client_timeout = httpx.Timeout(
        connect=settings.http_connect_timeout,
        read=read_timeout,
        write=read_timeout,
        pool=read_timeout,
    )
    limits = httpx.Limits(
        max_connections=20,
        max_keepalive_connections=10,
        keepalive_expiry=30.0,
    )
    if transport is None:
        transport = httpx.AsyncHTTPTransport(
            retries=settings.http_transport_retries if retries is None else retries,
        )

    return httpx.AsyncClient(
        base_url=base_url,
        headers=headers,
        timeout=client_timeout,
        limits=limits,
        transport=transport,
    )


async def get_http_client(
    name: str,
    base_url: str,
    *,
    retries: Optional[int] = None,
    timeout: Optional[float] = None,
) -> httpx.AsyncClient:
    """
    Obtiene el cliente HTTP compartido `name`. Si no existe, lo crea.
    """
    client = _clients.get(name)
    if client is not None and not client.is_closed:
        return client

    async with _http_client_lock:
        client = _clients.get(name)
        if client is None or client.is_closed:
            logger.info(f"🔗 Inicializando cliente HTTP '{name}' → {base_url}")
            client = build_http_client(base_url, retries=retries, timeout=timeout)
            _clients[name] = client
        return client


async def close_http_clients() -> None:
    """Cierra todos los clientes compartidos (shutdown)."""
    async with _http_client_lock:
        for name, client in list(_clients.items()):
            try:
                await client.aclose()
                logger.debug(f"Cliente HTTP '{name}' cerrado")
            except httpx.HTTPError as e:
                logger.debug(f"No se pudo cerrar cliente HTTP '{name}': {e}")
        _clients.clear()


__all__ = ["build_http_client", "get_http_client", "close_http_clients"]

# Fin del archivo pitbox/shared/core/http_client_cache.py
