# -*- coding: utf-8 -*-
"""
pitbox/core/container.py

Contenedor de servicios de la aplicación.

Construye una sola vez (en el lifespan) los clientes de los tres
servicios externos, el almacén clave/valor, la caché del catálogo y el
registro de flujos de activación. Las rutas lo obtienen con
`get_services(request)`.

Autor: PitBox
Fecha: 2026-09-26
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional

import httpx
from fastapi import Request

from pitbox.modules.accounts import AccountClient, AuthSession
from pitbox.modules.catalog import CatalogClient, CatalogService, MovieRequestClient
from pitbox.modules.payments.context import FlowContext
from pitbox.modules.payments.facades.activation import ActivationFlow, ActivationRegistry
from pitbox.modules.payments.gateway import PaymentGatewayClient
from pitbox.shared.cache import MemoryCache
from pitbox.shared.config import BaseAppSettings, PaymentsSettings, get_payments_settings
from pitbox.shared.core import close_http_clients, get_http_client
from pitbox.shared.storage import KeyValueStore, build_kv_store
from .settings import get_settings

logger = logging.getLogger(__name__)

GATEWAY = "gateway"
ACCOUNTS = "accounts"
CONTENT = "content"


@dataclass
class PitBoxServices:
    settings: BaseAppSettings
    payments_settings: PaymentsSettings
    store: KeyValueStore
    registry: ActivationRegistry
    gateway: PaymentGatewayClient
    accounts: AccountClient
    catalog: CatalogService
    movie_requests: MovieRequestClient

    def flow_context(self, namespace: str) -> FlowContext:
        return FlowContext(self.store, namespace)

    def account_client(self, token: Optional[str]) -> AccountClient:
        return self.accounts.with_token(token)

    def auth_session(self, context: FlowContext, token: Optional[str] = None) -> AuthSession:
        return AuthSession(self.account_client(token or context.get_token()), context)

    def new_flow(self, context: FlowContext, token: Optional[str]) -> ActivationFlow:
        return ActivationFlow(
            context=context,
            gateway=self.gateway,
            accounts=self.account_client(token),
            settings=self.payments_settings,
        )

    async def aclose(self) -> None:
        await self.registry.shutdown()
        await close_http_clients()


async def build_services(
    settings: Optional[BaseAppSettings] = None,
    payments_settings: Optional[PaymentsSettings] = None,
    *,
    clients: Optional[Dict[str, httpx.AsyncClient]] = None,
    store: Optional[KeyValueStore] = None,
) -> PitBoxServices:
    """
    Construye el contenedor.

    Args:
        clients: clientes HTTP ya construidos por nombre ('gateway',
            'accounts', 'content'); los que falten se crean compartidos.
        store: almacén alternativo (por defecto el configurado).
    """
    settings = settings or get_settings()
    payments_settings = payments_settings or get_payments_settings()
    clients = dict(clients or {})

    if GATEWAY not in clients:
        clients[GATEWAY] = await get_http_client(
            GATEWAY,
            payments_settings.payment_gateway_url,
            retries=0,
            timeout=payments_settings.gateway_timeout_seconds,
        )
    if ACCOUNTS not in clients:
        clients[ACCOUNTS] = await get_http_client(ACCOUNTS, settings.account_api_url, retries=0)
    if CONTENT not in clients:
        clients[CONTENT] = await get_http_client(CONTENT, settings.content_api_url)

    cache = MemoryCache(
        max_size=settings.catalog_cache_max_size,
        default_ttl=settings.catalog_cache_ttl_seconds,
        name="catalog",
    )

    services = PitBoxServices(
        settings=settings,
        payments_settings=payments_settings,
        store=store or build_kv_store(settings.kv_store_backend, settings.kv_store_path),
        registry=ActivationRegistry(),
        gateway=PaymentGatewayClient(clients[GATEWAY]),
        accounts=AccountClient(clients[ACCOUNTS]),
        catalog=CatalogService(
            CatalogClient(clients[CONTENT], max_retries=settings.catalog_max_retries),
            cache,
            ttl=settings.catalog_cache_ttl_seconds,
        ),
        movie_requests=MovieRequestClient(clients[CONTENT]),
    )
    logger.info(
        f"Servicios listos: gateway={payments_settings.payment_gateway_url} "
        f"accounts={settings.account_api_url} content={settings.content_api_url}"
    )
    return services


def get_services(request: Request) -> PitBoxServices:
    """Dependencia FastAPI: contenedor guardado en app.state."""
    return request.app.state.services


__all__ = ["PitBoxServices", "build_services", "get_services"]

# Fin del archivo pitbox/core/container.py
