# -*- coding: utf-8 -*-
"""
tests/modules/payments/facades/activation/test_registry.py

ActivationRegistry: búsqueda por id/namespace y por transacción,
registro de tareas de polling y cancelación en el apagado.
"""

import asyncio

import pytest

from pitbox.modules.payments.context import FlowContext
from pitbox.modules.payments.enums import ActivationState
from pitbox.modules.payments.facades.activation import ActivationRegistry, FlowNotFound
from tests.modules.payments.facades.activation.conftest import block_forever, gateway_tx


@pytest.mark.asyncio
async def test_get_respects_namespace(make_flow, memory_store):
    registry = ActivationRegistry()
    flow = registry.add(make_flow(context=FlowContext(memory_store, "device-a")))

    assert registry.get(flow.flow_id) is flow
    assert registry.get(flow.flow_id, namespace="device-a") is flow
    with pytest.raises(FlowNotFound):
        registry.get(flow.flow_id, namespace="device-b")
    with pytest.raises(FlowNotFound):
        registry.get("missing")


@pytest.mark.asyncio
async def test_find_by_reference_or_handle(make_flow, with_selection):
    registry = ActivationRegistry()
    flow = registry.add(make_flow(sleep=block_forever))
    await flow.start()

    assert registry.find_by_transaction(reference="ref-1") is flow
    assert registry.find_by_transaction(transaction_handle="tx-abc") is flow
    assert registry.find_by_transaction(reference="other") is None
    flow.cancel()


@pytest.mark.asyncio
async def test_track_and_shutdown_cancel_polling(make_flow, with_selection):
    registry = ActivationRegistry()
    flow = registry.add(make_flow(sleep=block_forever))
    await flow.start()
    registry.track(flow)

    assert registry.jobs.get_active_count() == 1

    await registry.shutdown(timeout=1.0)

    assert flow.poll_task.cancelled()
    assert registry.jobs.get_active_count() == 0
    # El estado no cambia: solo se detiene el seguimiento
    assert flow.state == ActivationState.CONFIRMING


@pytest.mark.asyncio
async def test_remove_cancels_flow(make_flow, with_selection):
    registry = ActivationRegistry()
    flow = registry.add(make_flow(sleep=block_forever))
    await flow.start()

    assert registry.remove(flow.flow_id) is flow
    await flow.wait()
    assert flow.poll_task.cancelled()
    assert len(registry) == 0
    assert registry.remove(flow.flow_id) is None


@pytest.mark.asyncio
async def test_prune_drops_oldest_terminal_flows(make_flow, gateway, with_selection):
    from pitbox.modules.payments.gateway import GatewayError

    gateway.initialize.side_effect = GatewayError("down", operation="initialize")
    registry = ActivationRegistry(max_flows=2)

    failed = registry.add(make_flow())
    await failed.start()
    idle_a = registry.add(make_flow())
    idle_b = registry.add(make_flow())

    assert len(registry) == 2
    with pytest.raises(FlowNotFound):
        registry.get(failed.flow_id)
    assert registry.get(idle_a.flow_id) is idle_a
    assert registry.get(idle_b.flow_id) is idle_b


@pytest.mark.asyncio
async def test_shutdown_waits_for_settled_activation(
    make_flow, with_selection, gateway, accounts, flow_context
):
    gate = asyncio.Event()
    subscription = accounts.subscribe.return_value

    async def slow_subscribe(package_id, phone_number):
        await gate.wait()
        return subscription

    accounts.subscribe.side_effect = slow_subscribe
    gateway.verify.side_effect = [gateway_tx("success")]
    registry = ActivationRegistry()
    flow = registry.add(make_flow())
    await flow.start()
    registry.track(flow)
    for _ in range(50):
        if accounts.subscribe.await_count:
            break
        await asyncio.sleep(0)

    shutdown = asyncio.create_task(registry.shutdown(timeout=1.0))
    await asyncio.sleep(0)
    assert not shutdown.done()

    gate.set()
    await shutdown

    assert flow.state == ActivationState.SUCCESS
    assert flow_context.is_premium() is True
    assert registry.jobs.get_active_count() == 0
