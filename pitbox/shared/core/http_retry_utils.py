# -*- coding: utf-8 -*-
"""
pitbox/shared/core/http_retry_utils.py

Reintentos con backoff exponencial para llamadas HTTP idempotentes
(lecturas del catálogo). Las llamadas de pago NO pasan por aquí.

Uso:
    response = await retry_with_backoff(
        client.get,
        "/movies/",
        max_retries=2,
        params={"limit": 50, "skip": 0},
    )

Autor: PitBox
Fecha: 2026-09-16
"""

from __future__ import annotations

import asyncio
import logging
import random
from typing import Any, Awaitable, Callable, Optional

import httpx

logger = logging.getLogger(__name__)


def next_delay(
    delay: float,
    *,
    backoff_factor: float,
    max_delay: float,
) -> float:
    """Siguiente espera de una serie exponencial acotada."""
    return min(delay * backoff_factor, max_delay)


def jittered(delay: float, jitter: float) -> float:
    """Suma jitter uniforme [0, jitter] para evitar thundering herd."""
    if jitter <= 0:
        return delay
    return delay + random.uniform(0, jitter)


async def retry_with_backoff(
    func: Callable[..., Awaitable[httpx.Response]],
    *args,
    max_retries: int = 3,
    base_delay: float = 0.5,
    max_delay: float = 10.0,
    backoff_factor: float = 2.0,
    retry_on_status: Optional[set[int]] = None,
    **kwargs
) -> httpx.Response:
    """
    Ejecuta una función HTTP con reintentos y backoff exponencial.

    Args:
        func: Función async a ejecutar (ej: client.get)
        max_retries: Número máximo de reintentos
        base_delay: Delay inicial en segundos
        max_delay: Delay máximo en segundos
        backoff_factor: Factor de multiplicación del delay
        retry_on_status: Códigos HTTP que deben reintentarse (default: 429/5xx)

    Returns:
        Response de httpx (la última, aunque su status sea reintentable)

    Raises:
        httpx.TransportError: Si todos los reintentos fallan por transporte
    """
    if max_retries < 0:
        raise ValueError(f"max_retries debe ser >= 0, recibido: {max_retries}")
    if base_delay <= 0:
        raise ValueError(f"base_delay debe ser > 0, recibido: {base_delay}")

    if retry_on_status is None:
        retry_on_status = {429, 500, 502, 503, 504}

    delay = base_delay

    for attempt in range(max_retries + 1):
        try:
            response = await func(*args, **kwargs)
        except httpx.TransportError as e:
            if attempt >= max_retries:
                logger.error(f"❌ Error de transporte tras {max_retries + 1} intentos: {e}")
                raise
            logger.warning(
                f"Error de transporte ({type(e).__name__}) en intento {attempt + 1}/{max_retries + 1}, "
                f"reintentando en {delay:.1f}s..."
            )
        else:
            if response.status_code not in retry_on_status or attempt >= max_retries:
                if attempt > 0:
                    logger.info(f"Respuesta HTTP {response.status_code} tras {attempt + 1} intentos")
                return response
            logger.warning(
                f"HTTP {response.status_code} en intento {attempt + 1}/{max_retries + 1}, "
                f"reintentando en {delay:.1f}s..."
            )

        await asyncio.sleep(jittered(delay, 0.2 * delay))
        delay = next_delay(delay, backoff_factor=backoff_factor, max_delay=max_delay)

    raise RuntimeError("Reintentos agotados sin respuesta")  # pragma: no cover


__all__ = ["retry_with_backoff", "next_delay", "jittered"]

# Fin del archivo pitbox/shared/core/http_retry_utils.py
