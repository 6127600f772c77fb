# -*- coding: utf-8 -*-
"""
pitbox/modules/payments/facades/activation/polling.py

Política de espera del loop de confirmación.

Por defecto el intervalo es fijo (5 s) dentro de una ventana de 180 s.
Backoff y jitter son ajustables por configuración y están desactivados
por defecto.

Autor: PitBox
Fecha: 2026-09-23
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from pitbox.shared.config import PaymentsSettings
from pitbox.shared.core import jittered, next_delay


@dataclass(frozen=True)
class PollPolicy:
    interval: float = 5.0
    timeout: float = 180.0
    backoff_factor: float = 1.0
    max_interval: float = 30.0
    jitter: float = 0.0

    @classmethod
    def from_settings(cls, settings: PaymentsSettings) -> "PollPolicy":
        return cls(
            interval=settings.poll_interval_seconds,
            timeout=settings.confirmation_timeout_seconds,
            backoff_factor=settings.poll_backoff_factor,
            max_interval=settings.poll_max_interval_seconds,
            jitter=settings.poll_jitter_seconds,
        )

    def delays(self) -> Iterator[float]:
        """Serie infinita de esperas entre consultas verify()."""
        delay = self.interval
        while True:
            yield jittered(delay, self.jitter)
            delay = next_delay(
                delay,
                backoff_factor=self.backoff_factor,
                max_delay=max(self.max_interval, self.interval),
            )


__all__ = ["PollPolicy"]

# Fin del archivo pitbox/modules/payments/facades/activation/polling.py
