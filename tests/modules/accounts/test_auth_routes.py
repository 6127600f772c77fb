# -*- coding: utf-8 -*-
"""
tests/modules/accounts/test_auth_routes.py

Sesión por HTTP: el token del login queda en el contexto del cliente y
las rutas protegidas lo usan sin cabecera Authorization.
"""

import pytest

HEADERS = {"X-Client-Id": "device-9"}


@pytest.mark.asyncio
async def test_login_then_me(async_client):
    resp = await async_client.post(
        "/auth/login", json={"username": "ann", "password": "secret"}, headers=HEADERS
    )
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["access_token"] == "tok-123"
    assert body["premium"] is False

    me = await async_client.get("/auth/me", headers=HEADERS)
    assert me.status_code == 200
    assert me.json()["user"]["username"] == "ann"


@pytest.mark.asyncio
async def test_login_bad_credentials(async_client):
    resp = await async_client.post(
        "/auth/login", json={"username": "ann", "password": "nope"}, headers=HEADERS
    )
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Incorrect username or password"


@pytest.mark.asyncio
async def test_me_without_session(async_client):
    resp = await async_client.get("/auth/me", headers=HEADERS)
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Not authenticated"


@pytest.mark.asyncio
async def test_logout_clears_session(async_client):
    await async_client.post("/auth/login", json={"username": "ann", "password": "secret"}, headers=HEADERS)

    resp = await async_client.post("/auth/logout", headers=HEADERS)
    assert resp.status_code == 204

    me = await async_client.get("/auth/me", headers=HEADERS)
    assert me.status_code == 401


@pytest.mark.asyncio
async def test_persisted_token_drives_activation(async_client, fake_gateway, fake_accounts):
    fake_gateway.verify_statuses = ["success"]
    await async_client.post("/auth/login", json={"username": "ann", "password": "secret"}, headers=HEADERS)
    await async_client.put(
        "/subscriptions/selection",
        json={"package_id": "p0", "phone_number": "0700000000"},
        headers=HEADERS,
    )

    resp = await async_client.post("/subscriptions/activations", headers=HEADERS)

    assert resp.status_code == 201, resp.text
    assert resp.json()["package_id"] == "p0"
