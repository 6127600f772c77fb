# -*- coding: utf-8 -*-
"""
pitbox/shared/core/async_job_registry.py

Registry de asyncio.Task activos (tareas de polling de activaciones).
Permite contar las tareas vivas y cancelarlas de forma ordenada en shutdown,
de modo que ningún temporizador quede vivo tras el desmontaje.

Autor: PitBox
Fecha: 2026-09-18
"""

import asyncio
import logging
import threading
from typing import Dict

logger = logging.getLogger(__name__)


class AsyncJobRegistry:
    """Registry thread-safe para mantener referencias de asyncio.Task activos."""

    def __init__(self):
        self._lock = threading.Lock()
        self._active_tasks: Dict[str, asyncio.Task] = {}

    def register_task(self, job_id: str, task: asyncio.Task) -> None:
        """Registra una task activa por job_id y la desregistra al terminar."""
        with self._lock:
            self._active_tasks[job_id] = task
        task.add_done_callback(lambda t, jid=job_id: self._forget(jid, t))
        logger.debug(f"📝 Task registrada: job_id={job_id}")

    def _forget(self, job_id: str, task: asyncio.Task) -> None:
        with self._lock:
            if self._active_tasks.get(job_id) is task:
                del self._active_tasks[job_id]

    def get_active_count(self) -> int:
        """Retorna el número de tasks activas."""
        with self._lock:
            return len([t for t in self._active_tasks.values() if not t.done()])

    async def cancel_all_tasks(self, timeout: float = 10.0) -> None:
        """
        Cancela todas las tasks activas y espera a que terminen.

        Args:
            timeout: Tiempo máximo de espera en segundos
        """
        with self._lock:
            active_tasks = [t for t in self._active_tasks.values() if not t.done()]

        if not active_tasks:
            logger.debug("No hay tasks activas para cancelar")
            return

        logger.info(f"🔄 Cancelando {len(active_tasks)} tasks activas...")
        for task in active_tasks:
            task.cancel()

        try:
            await asyncio.wait_for(
                asyncio.gather(*active_tasks, return_exceptions=True),
                timeout=timeout,
            )
        except asyncio.TimeoutError:
            logger.warning(f"⚠️ Timeout esperando cancelación de tasks ({timeout}s)")

        with self._lock:
            self._active_tasks.clear()


__all__ = ["AsyncJobRegistry"]

# Fin del archivo pitbox/shared/core/async_job_registry.py
