# -*- coding: utf-8 -*-
"""
tests/modules/payments/routes/test_packages_routes.py

Planes disponibles y selección pendiente por cliente.
"""

import pytest

from tests.conftest import PHONE, package_payload

HEADERS = {"X-Client-Id": "device-1"}


@pytest.mark.asyncio
async def test_list_packages_with_default(async_client, fake_accounts):
    fake_accounts.packages.append(package_payload("p2", "Retired", 100, active=False))

    resp = await async_client.get("/subscriptions/packages")

    assert resp.status_code == 200
    body = resp.json()
    assert [p["id"] for p in body["packages"]] == ["p0", "p1"]
    assert body["default_package_id"] == "p1"


@pytest.mark.asyncio
async def test_put_get_delete_selection(async_client):
    put = await async_client.put(
        "/subscriptions/selection",
        json={"package_id": "p1", "phone_number": "0700-000-000"},
        headers=HEADERS,
    )
    assert put.status_code == 200
    assert put.json() == {
        "package_id": "p1",
        "package_name": "Weekly",
        "price": 5000.0,
        "currency": "UGX",
        "duration_days": 7,
        "phone_number": PHONE,
    }

    got = await async_client.get("/subscriptions/selection", headers=HEADERS)
    assert got.json()["phone_number"] == PHONE

    # Otro cliente no ve la selección
    other = await async_client.get("/subscriptions/selection", headers={"X-Client-Id": "device-2"})
    assert other.status_code == 404

    deleted = await async_client.delete("/subscriptions/selection", headers=HEADERS)
    assert deleted.status_code == 204
    assert (await async_client.get("/subscriptions/selection", headers=HEADERS)).status_code == 404


@pytest.mark.asyncio
async def test_select_unknown_or_inactive_package(async_client, fake_accounts):
    fake_accounts.packages.append(package_payload("p2", "Retired", 100, active=False))

    for package_id in ("nope", "p2"):
        resp = await async_client.put(
            "/subscriptions/selection",
            json={"package_id": package_id, "phone_number": "0700000000"},
            headers=HEADERS,
        )
        assert resp.status_code == 404


@pytest.mark.asyncio
async def test_select_blank_phone(async_client):
    resp = await async_client.put(
        "/subscriptions/selection",
        json={"package_id": "p1", "phone_number": " - "},
        headers=HEADERS,
    )
    assert resp.status_code == 422
    assert resp.json()["detail"] == "Please enter your phone number"
