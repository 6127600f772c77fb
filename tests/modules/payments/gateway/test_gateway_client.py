# -*- coding: utf-8 -*-
"""
tests/modules/payments/gateway/test_gateway_client.py

PaymentGatewayClient sobre httpx.MockTransport: rutas relativas a la
URL base, forma del cuerpo y mapeo de errores a GatewayError.
"""

import json

import httpx
import pytest

from pitbox.modules.payments.gateway import GatewayError, PaymentGatewayClient
from tests.conftest import GATEWAY_URL, PHONE, gateway_payload, mock_client


def _initialize_kwargs(**overrides):
    kwargs = dict(
        amount=5000,
        phone_number=PHONE,
        reference="ref-1",
        country="UG",
        description="PitBox Weekly Subscription",
        callback_url="https://example.test/api/payments/webhook",
    )
    kwargs.update(overrides)
    return kwargs


@pytest.mark.asyncio
async def test_initialize_posts_body_and_returns_handle():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=gateway_payload("tx-abc", "processing", "ref-1"))

    gateway = PaymentGatewayClient(mock_client(GATEWAY_URL, handler))
    tx = await gateway.initialize(**_initialize_kwargs())

    assert seen["url"] == "http://gateway.test/v1/pay/initialize"
    assert seen["body"] == {
        "amount": 5000.0,
        "phone_number": PHONE,
        "reference": "ref-1",
        "country": "UG",
        "description": "PitBox Weekly Subscription",
        "callback_url": "https://example.test/api/payments/webhook",
    }
    assert tx.transaction_handle == "tx-abc"
    assert tx.status == "processing"
    assert tx.reference == "ref-1"


@pytest.mark.asyncio
async def test_verify_uses_handle_in_path():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["method"] = request.method
        return httpx.Response(200, json=gateway_payload("tx-abc", "completed"))

    gateway = PaymentGatewayClient(mock_client(GATEWAY_URL, handler))
    tx = await gateway.verify("tx-abc")

    assert seen == {"path": "/v1/pay/verify/tx-abc", "method": "GET"}
    assert tx.status == "completed"


@pytest.mark.asyncio
async def test_error_status_uses_response_text():
    gateway = PaymentGatewayClient(
        mock_client(GATEWAY_URL, lambda r: httpx.Response(400, text="Invalid phone number"))
    )
    with pytest.raises(GatewayError) as exc:
        await gateway.initialize(**_initialize_kwargs())

    assert exc.value.message == "Invalid phone number"
    assert exc.value.operation == "initialize"
    assert exc.value.status_code == 400


@pytest.mark.asyncio
async def test_error_status_without_body_has_default_message():
    gateway = PaymentGatewayClient(mock_client(GATEWAY_URL, lambda r: httpx.Response(502)))
    with pytest.raises(GatewayError, match="Failed to verify payment: 502"):
        await gateway.verify("tx-abc")


@pytest.mark.asyncio
async def test_network_error_is_gateway_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    gateway = PaymentGatewayClient(mock_client(GATEWAY_URL, handler))
    with pytest.raises(GatewayError, match="unreachable"):
        await gateway.verify("tx-abc")


@pytest.mark.asyncio
@pytest.mark.parametrize("response", [
    httpx.Response(200, text="<html>oops</html>"),
    httpx.Response(200, json=["not", "a", "dict"]),
    httpx.Response(200, json={"status": "success", "data": {}}),
    httpx.Response(200, json={"status": "error", "message": "Transaction not found", "data": None}),
])
async def test_malformed_bodies_are_gateway_errors(response):
    gateway = PaymentGatewayClient(mock_client(GATEWAY_URL, lambda r: response))
    with pytest.raises(GatewayError):
        await gateway.verify("tx-abc")


@pytest.mark.asyncio
async def test_malformed_body_prefers_gateway_message():
    body = {"status": "error", "message": "Transaction not found", "data": None}
    gateway = PaymentGatewayClient(mock_client(GATEWAY_URL, lambda r: httpx.Response(200, json=body)))
    with pytest.raises(GatewayError, match="Transaction not found"):
        await gateway.verify("tx-abc")


@pytest.mark.asyncio
async def test_invalid_amount_is_rejected_before_sending():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json=gateway_payload())

    gateway = PaymentGatewayClient(mock_client(GATEWAY_URL, handler))
    with pytest.raises(ValueError):
        await gateway.initialize(**_initialize_kwargs(amount=0))
    assert calls == []
