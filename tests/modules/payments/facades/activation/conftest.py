# tests/modules/payments/facades/activation/conftest.py
# -*- coding: utf-8 -*-
"""
Fixtures del flujo de activación: pasarela y servicio de cuentas
simulados con AsyncMock(spec=...) y reloj falso inyectado.
"""

from __future__ import annotations

import asyncio
from itertools import count
from unittest.mock import AsyncMock

import pytest

from pitbox.modules.accounts import AccountClient
from pitbox.modules.payments.facades.activation import ActivationFlow
from pitbox.modules.payments.gateway import PaymentGatewayClient
from pitbox.modules.payments.schemas import GatewayTransaction
from tests.conftest import make_subscription


def gateway_tx(status: str = "processing", handle: str = "tx-abc", reference: str = "ref-1") -> GatewayTransaction:
    return GatewayTransaction(transaction_handle=handle, reference=reference, status=status)


async def block_forever(_delay: float) -> None:
    """Sleep que nunca vuelve: deja el loop de polling aparcado."""
    await asyncio.Event().wait()


@pytest.fixture
def gateway():
    mock = AsyncMock(spec=PaymentGatewayClient)
    mock.initialize.return_value = gateway_tx("processing")
    mock.verify.return_value = gateway_tx("processing")
    return mock


@pytest.fixture
def accounts():
    mock = AsyncMock(spec=AccountClient)
    mock.subscribe.return_value = make_subscription()
    return mock


@pytest.fixture
def notices():
    return []


@pytest.fixture
def make_flow(flow_context, payments_settings, gateway, accounts, fake_clock, notices):
    """Fábrica de ActivationFlow con dependencias simuladas."""
    refs = count(1)

    def _make(**overrides) -> ActivationFlow:
        kwargs = dict(
            context=flow_context,
            gateway=gateway,
            accounts=accounts,
            settings=payments_settings,
            clock=fake_clock,
            sleep=fake_clock.sleep,
            reference_factory=lambda: f"ref-{next(refs)}",
            on_notice=notices.append,
        )
        kwargs.update(overrides)
        return ActivationFlow(**kwargs)

    return _make


@pytest.fixture
def with_selection(flow_context, pending_selection):
    flow_context.set_selection(pending_selection)
    return pending_selection
