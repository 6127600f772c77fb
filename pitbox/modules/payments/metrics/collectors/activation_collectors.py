# -*- coding: utf-8 -*-
"""
pitbox/modules/payments/metrics/collectors/activation_collectors.py

Coleccionistas Prometheus del flujo de activación.

Registra:
- Flujos iniciados por camino (payment/redemption)
- Resultados terminales por estado y tipo de fallo
- Resultados de cada consulta verify()
- Suscripciones creadas (debe coincidir con pagos liquidados)
- Tiempo desde 'confirming' hasta el estado terminal
- Flujos con polling activo

Autor: PitBox
Fecha: 2026-09-23
"""
from prometheus_client import Counter, Gauge, Histogram

NAMESPACE = "pitbox"
SUBSYSTEM = "activation"

activation_flows_started_total = Counter(
    f"{NAMESPACE}_{SUBSYSTEM}_flows_started_total",
    "Flujos de activación iniciados",
    labelnames=("path",),  # payment|redemption
)

activation_outcomes_total = Counter(
    f"{NAMESPACE}_{SUBSYSTEM}_outcomes_total",
    "Estados terminales alcanzados",
    labelnames=("state", "failure_kind"),  # failure_kind = none|initialization|payment|timeout|activation
)

activation_poll_results_total = Counter(
    f"{NAMESPACE}_{SUBSYSTEM}_poll_results_total",
    "Resultados de verify() por estado reportado",
    labelnames=("result",),  # processing|completed|success|failed|unknown|error
)

activation_subscribe_calls_total = Counter(
    f"{NAMESPACE}_{SUBSYSTEM}_subscribe_calls_total",
    "Llamadas a subscribe tras pago liquidado",
    labelnames=("success",),
)

activation_confirmation_seconds = Histogram(
    f"{NAMESPACE}_{SUBSYSTEM}_confirmation_seconds",
    "Tiempo desde 'confirming' hasta estado terminal (segundos)",
    buckets=(5, 10, 20, 30, 60, 90, 120, 180, 300),
)

activation_polling_flows = Gauge(
    f"{NAMESPACE}_{SUBSYSTEM}_polling_flows",
    "Flujos con loop de confirmación activo",
)

__all__ = [
    "activation_flows_started_total",
    "activation_outcomes_total",
    "activation_poll_results_total",
    "activation_subscribe_calls_total",
    "activation_confirmation_seconds",
    "activation_polling_flows",
]

# Fin del archivo pitbox/modules/payments/metrics/collectors/activation_collectors.py
