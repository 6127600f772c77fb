# -*- coding: utf-8 -*-
"""
pitbox/shared/core/__init__.py

Recursos HTTP compartidos: clientes por servicio y reintentos.

Autor: PitBox
Fecha: 2026-09-16
"""

from .http_client_cache import build_http_client, get_http_client, close_http_clients
from .http_retry_utils import retry_with_backoff, next_delay, jittered
from .async_job_registry import AsyncJobRegistry

__all__ = [
    "build_http_client",
    "get_http_client",
    "close_http_clients",
    "retry_with_backoff",
    "next_delay",
    "jittered",
    "AsyncJobRegistry",
]
