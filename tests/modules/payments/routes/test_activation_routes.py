# -*- coding: utf-8 -*-
"""
tests/modules/payments/routes/test_activation_routes.py

Flujo de activación completo por HTTP contra la app real con la
pasarela y el servicio de cuentas simulados (httpx.MockTransport).
Intervalo de polling de 10 ms y ventana de 1 s.
"""

import pytest

from tests.conftest import PHONE, wait_for_state

TERMINAL = {"success", "failed"}


async def _select_plan(client, headers, body):
    resp = await client.put("/subscriptions/selection", json=body, headers=headers)
    assert resp.status_code == 200, resp.text
    return resp.json()


@pytest.mark.asyncio
async def test_payment_happy_path(async_client, auth_headers, selection_body, fake_gateway, fake_accounts):
    fake_gateway.verify_statuses = ["processing", "success"]
    await _select_plan(async_client, auth_headers, selection_body)

    resp = await async_client.post("/subscriptions/activations", headers=auth_headers)
    assert resp.status_code == 201, resp.text
    started = resp.json()
    assert started["state"] == "confirming"
    assert started["path"] == "payment"
    assert started["transaction"]["uuid"] == "tx-abc"
    assert started["package_id"] == "p1"

    final = await wait_for_state(async_client, started["flow_id"], auth_headers, TERMINAL)

    assert final["state"] == "success"
    assert final["subscription_id"] == "sub-1"
    assert fake_accounts.subscribe_calls == [{"package_id": "p1", "phone_number": PHONE}]
    assert fake_gateway.initialize_bodies[0]["reference"] == started["transaction"]["reference"]

    selection = await async_client.get("/subscriptions/selection", headers=auth_headers)
    assert selection.status_code == 404


@pytest.mark.asyncio
async def test_start_without_selection_redirects_to_plans(async_client, auth_headers, fake_gateway):
    resp = await async_client.post("/subscriptions/activations", headers=auth_headers)

    assert resp.status_code == 422
    assert resp.json()["detail"]["redirect"] == "/subscriptions/selection"
    assert fake_gateway.initialize_bodies == []


@pytest.mark.asyncio
async def test_start_requires_token(async_client, selection_body):
    headers = {"X-Client-Id": "anon"}
    await _select_plan(async_client, headers, selection_body)

    resp = await async_client.post("/subscriptions/activations", headers=headers)
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_malformed_authorization_header(async_client):
    resp = await async_client.post(
        "/subscriptions/activations", headers={"Authorization": "Token abc"}
    )
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_initialize_rejected_then_retry(async_client, auth_headers, selection_body, fake_gateway):
    fake_gateway.initialize_status = 400
    await _select_plan(async_client, auth_headers, selection_body)

    resp = await async_client.post("/subscriptions/activations", headers=auth_headers)
    assert resp.status_code == 201
    failed = resp.json()
    assert failed["state"] == "failed"
    assert failed["failure_kind"] == "initialization"
    assert failed["message"] == "Phone number not supported"
    assert failed["retryable"] is True
    assert fake_gateway.verify_calls == 0

    fake_gateway.initialize_status = 200
    fake_gateway.verify_statuses = ["success"]
    retry = await async_client.post(
        f"/subscriptions/activations/{failed['flow_id']}/retry", headers=auth_headers
    )
    assert retry.status_code == 200, retry.text
    assert retry.json()["state"] == "confirming"

    final = await wait_for_state(async_client, failed["flow_id"], auth_headers, TERMINAL)
    assert final["state"] == "success"
    refs = [body["reference"] for body in fake_gateway.initialize_bodies]
    assert len(refs) == 2 and refs[0] != refs[1]


@pytest.mark.asyncio
async def test_confirmation_timeout(async_client, auth_headers, selection_body, fake_accounts):
    await _select_plan(async_client, auth_headers, selection_body)
    started = (await async_client.post("/subscriptions/activations", headers=auth_headers)).json()

    final = await wait_for_state(async_client, started["flow_id"], auth_headers, TERMINAL, timeout=5.0)

    assert final["state"] == "failed"
    assert final["failure_kind"] == "timeout"
    assert "timed out" in final["message"]
    assert final["contact_support"] is True
    assert fake_accounts.subscribe_calls == []


@pytest.mark.asyncio
async def test_activation_failure_cannot_be_retried(
    async_client, auth_headers, selection_body, fake_gateway, fake_accounts
):
    fake_gateway.verify_statuses = ["success"]
    fake_accounts.subscribe_status = 500
    await _select_plan(async_client, auth_headers, selection_body)
    started = (await async_client.post("/subscriptions/activations", headers=auth_headers)).json()

    final = await wait_for_state(async_client, started["flow_id"], auth_headers, TERMINAL)
    assert final["state"] == "failed"
    assert final["failure_kind"] == "activation"
    assert final["retryable"] is False
    assert "Do not pay again" in final["message"]

    retry = await async_client.post(
        f"/subscriptions/activations/{started['flow_id']}/retry", headers=auth_headers
    )
    assert retry.status_code == 409
    assert len(fake_accounts.subscribe_calls) == 1


@pytest.mark.asyncio
async def test_flows_are_scoped_to_client_id(async_client, auth_headers, selection_body, fake_gateway):
    fake_gateway.verify_statuses = ["success"]
    await _select_plan(async_client, auth_headers, selection_body)
    started = (await async_client.post("/subscriptions/activations", headers=auth_headers)).json()

    other = await async_client.get(
        f"/subscriptions/activations/{started['flow_id']}", headers={"X-Client-Id": "device-2"}
    )
    assert other.status_code == 404

    missing = await async_client.get("/subscriptions/activations/nope", headers=auth_headers)
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_abandon_cancels_and_clears_selection(async_client, auth_headers, selection_body):
    await _select_plan(async_client, auth_headers, selection_body)
    started = (await async_client.post("/subscriptions/activations", headers=auth_headers)).json()

    resp = await async_client.delete(
        f"/subscriptions/activations/{started['flow_id']}", headers=auth_headers
    )
    assert resp.status_code == 204

    gone = await async_client.get(f"/subscriptions/activations/{started['flow_id']}", headers=auth_headers)
    assert gone.status_code == 404
    selection = await async_client.get("/subscriptions/selection", headers=auth_headers)
    assert selection.status_code == 404


@pytest.mark.asyncio
async def test_payments_disabled(async_client, auth_headers, fast_payments_settings):
    fast_payments_settings.payments_enabled = False
    resp = await async_client.post("/subscriptions/activations", headers=auth_headers)
    assert resp.status_code == 503


@pytest.mark.asyncio
async def test_retry_refused_when_payments_disabled(
    async_client, auth_headers, selection_body, fake_gateway, fast_payments_settings
):
    fake_gateway.initialize_status = 400
    await _select_plan(async_client, auth_headers, selection_body)
    failed = (await async_client.post("/subscriptions/activations", headers=auth_headers)).json()
    assert failed["failure_kind"] == "initialization"

    fast_payments_settings.payments_enabled = False
    fake_gateway.initialize_status = 200
    resp = await async_client.post(
        f"/subscriptions/activations/{failed['flow_id']}/retry", headers=auth_headers
    )

    assert resp.status_code == 503
    assert resp.json()["detail"] == "Payments are disabled"
    assert len(fake_gateway.initialize_bodies) == 1
    snapshot = (await async_client.get(
        f"/subscriptions/activations/{failed['flow_id']}", headers=auth_headers
    )).json()
    assert snapshot["state"] == "failed"


@pytest.mark.asyncio
async def test_invalid_client_id(async_client):
    resp = await async_client.get("/subscriptions/selection", headers={"X-Client-Id": "bad id!"})
    assert resp.status_code == 400


# ---------------------------------------------------------------------------
# Canje de voucher
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_redeem_valid_code(async_client, auth_headers, selection_body, fake_gateway, fake_accounts):
    await _select_plan(async_client, auth_headers, selection_body)

    resp = await async_client.post(
        "/subscriptions/redeem", json={"code": "GOOD-CODE"}, headers=auth_headers
    )

    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["state"] == "success"
    assert body["path"] == "redemption"
    assert body["transaction"] is None
    assert fake_accounts.redeem_calls == [{"code": "GOOD-CODE", "phone_number": PHONE}]
    assert fake_gateway.initialize_bodies == []
    assert fake_gateway.verify_calls == 0

    snapshot = await async_client.get(f"/subscriptions/activations/{body['flow_id']}", headers=auth_headers)
    assert snapshot.json()["state"] == "success"


@pytest.mark.asyncio
async def test_redeem_with_phone_in_body(async_client, auth_headers, fake_accounts):
    resp = await async_client.post(
        "/subscriptions/redeem",
        json={"code": "GOOD-CODE", "phone_number": "256 700 000 000"},
        headers=auth_headers,
    )
    assert resp.status_code == 200, resp.text
    assert fake_accounts.redeem_calls[0]["phone_number"] == PHONE


@pytest.mark.asyncio
async def test_redeem_invalid_code(async_client, auth_headers, selection_body, fake_accounts):
    await _select_plan(async_client, auth_headers, selection_body)

    resp = await async_client.post(
        "/subscriptions/redeem", json={"code": "BAD"}, headers=auth_headers
    )
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Invalid or expired code"


@pytest.mark.asyncio
async def test_redeem_without_phone(async_client, auth_headers):
    resp = await async_client.post(
        "/subscriptions/redeem", json={"code": "GOOD-CODE"}, headers=auth_headers
    )
    assert resp.status_code == 422
    assert resp.json()["detail"]["redirect"] == "/subscriptions/selection"


@pytest.mark.asyncio
async def test_redeem_with_expired_token(async_client, selection_body):
    headers = {"Authorization": "Bearer stale", "X-Client-Id": "device-1"}
    await _select_plan(async_client, headers, selection_body)

    resp = await async_client.post("/subscriptions/redeem", json={"code": "GOOD-CODE"}, headers=headers)
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_redemption_disabled(async_client, auth_headers, fast_payments_settings):
    fast_payments_settings.redemption_enabled = False
    resp = await async_client.post(
        "/subscriptions/redeem", json={"code": "GOOD-CODE"}, headers=auth_headers
    )
    assert resp.status_code == 503
