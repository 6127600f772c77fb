# -*- coding: utf-8 -*-
"""
pitbox/modules/payments/facades/activation/registry.py

Registro en memoria de flujos de activación.

- Indexa los flujos por flow_id, referencia y handle de la pasarela
  (el callback de la pasarela llega por referencia o uuid).
- Registra la tarea de polling de cada flujo en AsyncJobRegistry para
  cancelarlas todas en el apagado.
- Los flujos no se persisten: un reinicio pierde el seguimiento de los
  pagos en 'confirming'.

Autor: PitBox
Fecha: 2026-09-24
"""

from __future__ import annotations

import asyncio
import logging
from collections import OrderedDict
from typing import Optional

from pitbox.shared.core import AsyncJobRegistry
from .errors import FlowNotFound
from .flow import ActivationFlow

logger = logging.getLogger(__name__)


class ActivationRegistry:
    """Flujos vivos del proceso."""

    def __init__(self, jobs: Optional[AsyncJobRegistry] = None, max_flows: int = 1000):
        self._jobs = jobs or AsyncJobRegistry()
        self._flows: "OrderedDict[str, ActivationFlow]" = OrderedDict()
        self._max_flows = max_flows

    def __len__(self) -> int:
        return len(self._flows)

    @property
    def jobs(self) -> AsyncJobRegistry:
        return self._jobs

    def add(self, flow: ActivationFlow) -> ActivationFlow:
        self._flows[flow.flow_id] = flow
        self._prune()
        return flow

    def get(self, flow_id: str, namespace: Optional[str] = None) -> ActivationFlow:
        """
        Raises:
            FlowNotFound: id desconocido o de otro cliente.
        """
        flow = self._flows.get(flow_id)
        if flow is None or (namespace is not None and flow.context.namespace != namespace):
            raise FlowNotFound(flow_id)
        return flow

    def remove(self, flow_id: str) -> Optional[ActivationFlow]:
        flow = self._flows.pop(flow_id, None)
        if flow is not None:
            flow.cancel()
        return flow

    def track(self, flow: ActivationFlow) -> None:
        """Registra la tarea de polling actual del flujo."""
        task = flow.poll_task
        if task is not None and not task.done():
            self._jobs.register_task(flow.flow_id, task)

    def find_by_transaction(
        self,
        *,
        reference: Optional[str] = None,
        transaction_handle: Optional[str] = None,
    ) -> Optional[ActivationFlow]:
        for flow in reversed(self._flows.values()):
            tx = flow.transaction
            if tx is None:
                continue
            if reference and tx.reference == reference:
                return flow
            if transaction_handle and tx.uuid == transaction_handle:
                return flow
        return None

    def _prune(self) -> None:
        if len(self._flows) <= self._max_flows:
            return
        for flow_id in list(self._flows):
            if len(self._flows) <= self._max_flows:
                break
            if self._flows[flow_id].state.is_terminal:
                del self._flows[flow_id]

    async def shutdown(self, timeout: float = 10.0) -> None:
        """
        Cancela todos los loops de confirmación (apagado de la app).

        Las activaciones con pago ya liquidado no se cancelan: se esperan
        hasta `timeout` para que subscribe llegue a un estado terminal
        antes de cerrar los clientes HTTP.
        """
        for flow in self._flows.values():
            flow.cancel()

        activations = [
            flow.activation_task
            for flow in self._flows.values()
            if flow.activation_task is not None and not flow.activation_task.done()
        ]
        if activations:
            logger.info(f"⏳ Esperando {len(activations)} activaciones en curso...")
            _, pending = await asyncio.wait(activations, timeout=timeout)
            if pending:
                logger.error(f"❌ {len(pending)} activaciones sin terminar al apagar ({timeout}s)")

        await self._jobs.cancel_all_tasks(timeout=timeout)
        logger.info(f"Registro de activación cerrado ({len(self._flows)} flujos)")


__all__ = ["ActivationRegistry"]

# Fin del archivo pitbox/modules/payments/facades/activation/registry.py
