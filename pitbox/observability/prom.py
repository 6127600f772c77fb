# -*- coding: utf-8 -*-
"""
pitbox/observability/prom.py

Observabilidad Prometheus de PitBox.

Incluye:
- Middleware HTTP con conteo y latencia por plantilla de ruta/estado
  (los flow_id no generan series nuevas)
- Endpoint /metrics (pull model), multiproceso si PROMETHEUS_MULTIPROC_DIR

Autor: PitBox
Fecha: 2026-09-27
"""
from __future__ import annotations

import os
from time import perf_counter
from typing import Optional

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from prometheus_client import (
    CollectorRegistry, multiprocess, generate_latest, CONTENT_TYPE_LATEST,
    Counter, Histogram,
)

REQUEST_COUNT = Counter(
    "pitbox_http_requests_total",
    "Total HTTP requests",
    ["method", "path", "status"],
)
REQUEST_LATENCY = Histogram(
    "pitbox_http_request_latency_seconds",
    "Latency per request (s)",
    ["method", "path", "status"],
)


def _route_template(request: Request) -> str:
    route = request.scope.get("route")
    return getattr(route, "path", None) or "unmatched"


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Instrumenta las peticiones HTTP."""

    async def dispatch(self, request, call_next):
        start = perf_counter()
        resp = await call_next(request)
        elapsed = perf_counter() - start

        labels = (request.method, _route_template(request), str(resp.status_code))
        REQUEST_LATENCY.labels(*labels).observe(elapsed)
        REQUEST_COUNT.labels(*labels).inc()
        return resp


def _build_registry() -> Optional[CollectorRegistry]:
    if os.environ.get("PROMETHEUS_MULTIPROC_DIR"):
        registry = CollectorRegistry()
        multiprocess.MultiProcessCollector(registry)
        return registry
    return None


def mount_metrics(app: FastAPI, path: str = "/metrics") -> None:
    """Registra el endpoint /metrics en la app FastAPI."""
    registry = _build_registry()

    @app.get(path, include_in_schema=False)
    def metrics():
        data = generate_latest(registry) if registry else generate_latest()
        return Response(content=data, media_type=CONTENT_TYPE_LATEST)


def setup_observability(app: FastAPI) -> None:
    app.add_middleware(PrometheusMiddleware)
    mount_metrics(app)


__all__ = ["setup_observability", "mount_metrics", "PrometheusMiddleware"]

# Fin del archivo pitbox/observability/prom.py
