# -*- coding: utf-8 -*-
"""
pitbox/shared/config/settings_payments.py

Configuración de la pasarela de dinero móvil y del flujo de activación.

Descripción:
    Centraliza la URL de la pasarela, país, callback, intervalos de
    polling y la ventana de confirmación. El intervalo y la ventana son
    parámetros ajustables; por defecto no hay backoff ni jitter.

Autor: PitBox
Fecha: 2026-09-15
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PaymentsSettings(BaseSettings):
    """Configuración del sistema de pagos."""

    # =========================================================================
    # FEATURE FLAGS
    # =========================================================================

    payments_enabled: bool = Field(
        default=True,
        description="Habilita el flujo de pago por dinero móvil"
    )

    redemption_enabled: bool = Field(
        default=True,
        description="Habilita el canje de vouchers (activación sin pago)"
    )

    # =========================================================================
    # PASARELA
    # =========================================================================

    payment_gateway_url: str = Field(
        default="https://mintospay.vercel.app/v1/pay",
        description="URL base de la pasarela (initialize / verify/{uuid})"
    )

    payment_country: str = Field(
        default="UG",
        description="País ISO-3166 enviado a la pasarela"
    )

    payment_callback_url: str = Field(
        default="https://mintos-vd.vercel.app/api/payments/webhook",
        description="URL que la pasarela notifica al liquidar la transacción"
    )

    payment_description_template: str = Field(
        default="PitBox {plan} Subscription",
        description="Descripción del cobro; {plan} se sustituye por el nombre del plan"
    )

    default_currency: str = Field(
        default="UGX",
        description="Moneda por defecto cuando el plan no la declara"
    )

    gateway_timeout_seconds: float = Field(
        default=20.0,
        description="Timeout HTTP de cada llamada a la pasarela"
    )

    # =========================================================================
    # POLLING Y VENTANA DE CONFIRMACIÓN
    # =========================================================================

    poll_interval_seconds: float = Field(
        default=5.0,
        description="Intervalo entre consultas verify()"
    )

    poll_backoff_factor: float = Field(
        default=1.0,
        description="Factor multiplicativo del intervalo (1.0 = intervalo fijo)"
    )

    poll_max_interval_seconds: float = Field(
        default=30.0,
        description="Intervalo máximo cuando hay backoff"
    )

    poll_jitter_seconds: float = Field(
        default=0.0,
        description="Jitter uniforme [0, n] sumado a cada espera"
    )

    confirmation_timeout_seconds: float = Field(
        default=180.0,
        description="Ventana total de confirmación desde la entrada a 'confirming'"
    )

    # =========================================================================
    # SEGURIDAD
    # =========================================================================

    webhook_shared_secret: Optional[str] = Field(
        default=None,
        description="Secreto compartido opcional esperado en X-Webhook-Secret"
    )

    @field_validator("payment_gateway_url", mode="after")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @model_validator(mode="after")
    def _check_polling(self) -> "PaymentsSettings":
        if self.poll_interval_seconds <= 0:
            raise ValueError("POLL_INTERVAL_SECONDS debe ser > 0")
        if self.poll_backoff_factor < 1.0:
            raise ValueError("POLL_BACKOFF_FACTOR debe ser >= 1.0")
        if self.confirmation_timeout_seconds <= self.poll_interval_seconds:
            raise ValueError("CONFIRMATION_TIMEOUT_SECONDS debe superar POLL_INTERVAL_SECONDS")
        return self

    # =========================================================================
    # CONFIGURACIÓN DE PYDANTIC
    # =========================================================================

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# Singleton global
_payments_settings: Optional[PaymentsSettings] = None


def get_payments_settings() -> PaymentsSettings:
    """
    Obtiene la instancia global de configuración de pagos.

    Returns:
        PaymentsSettings: Configuración de pagos
    """
    global _payments_settings
    if _payments_settings is None:
        _payments_settings = PaymentsSettings()
    return _payments_settings


__all__ = [
    "PaymentsSettings",
    "get_payments_settings",
]
# Fin del archivo pitbox/shared/config/settings_payments.py
