# -*- coding: utf-8 -*-
"""
pitbox/modules/payments/metrics/__init__.py

Métricas Prometheus del módulo de pagos. Se exponen en GET /metrics.

Autor: PitBox
Fecha: 2026-09-23
"""

from .collectors import (
    activation_confirmation_seconds,
    activation_flows_started_total,
    activation_outcomes_total,
    activation_poll_results_total,
    activation_polling_flows,
    activation_subscribe_calls_total,
)

__all__ = [
    "activation_confirmation_seconds",
    "activation_flows_started_total",
    "activation_outcomes_total",
    "activation_poll_results_total",
    "activation_polling_flows",
    "activation_subscribe_calls_total",
]

# Fin del archivo pitbox/modules/payments/metrics/__init__.py
