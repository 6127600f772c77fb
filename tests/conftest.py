# tests/conftest.py
# -*- coding: utf-8 -*-
"""
Config global de tests para PitBox.

- PYTHON_ENV=test antes de importar la app (URLs *.test, almacén en memoria)
- Reloj y sleep falsos para que la ventana de 180 s corra al instante
- Dobles HTTP de la pasarela y del servicio de cuentas sobre httpx.MockTransport
"""

from __future__ import annotations

import asyncio
import json
import os
from collections.abc import AsyncIterator
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Optional

os.environ["PYTHON_ENV"] = "test"

import httpx
import pytest

from pitbox.modules.accounts.schemas import PackageResponse, SubscriptionResponse
from pitbox.modules.payments.context import FlowContext
from pitbox.modules.payments.schemas import PendingSelection
from pitbox.shared.config import PaymentsSettings
from pitbox.shared.storage import MemoryKeyValueStore

GATEWAY_URL = "http://gateway.test/v1/pay"
ACCOUNTS_URL = "http://accounts.test"
CONTENT_URL = "http://content.test"

PHONE = "+256700000000"


# -----------------------------------------------------------------------------
# Helpers de payloads
# -----------------------------------------------------------------------------

def json_response(status_code: int, payload: Any) -> httpx.Response:
    return httpx.Response(status_code, json=payload)


def gateway_payload(uuid: str = "tx-abc", status: str = "processing", reference: str = "ref-1") -> dict:
    """Respuesta con la forma anidada de la pasarela."""
    return {
        "status": "success",
        "message": "ok",
        "data": {
            "transaction": {
                "uuid": uuid,
                "reference": reference,
                "status": status,
                "provider_reference": None,
            },
            "collection": {
                "amount": {"formatted": "5,000", "raw": "5000", "currency": "UGX"},
                "provider": "mtn",
                "phone_number": PHONE,
            },
        },
    }


def package_payload(pid: str = "p1", name: str = "Weekly", price: float = 5000, active: bool = True) -> dict:
    return {
        "id": pid,
        "name": name,
        "price": price,
        "currency": "UGX",
        "duration_days": 7,
        "description": None,
        "is_active": active,
    }


def subscription_payload(package_id: str = "p1", phone: str = PHONE) -> dict:
    now = datetime(2026, 9, 1, tzinfo=timezone.utc)
    return {
        "id": "sub-1",
        "user_id": "u1",
        "package": package_payload(package_id),
        "phone_number": phone,
        "start_date": now.isoformat(),
        "end_date": (now + timedelta(days=7)).isoformat(),
        "is_active": True,
        "created_at": now.isoformat(),
    }


def make_subscription(package_id: str = "p1", phone: str = PHONE) -> SubscriptionResponse:
    return SubscriptionResponse.model_validate(subscription_payload(package_id, phone))


def make_package(pid: str = "p1", name: str = "Weekly", price: float = 5000, active: bool = True) -> PackageResponse:
    return PackageResponse.model_validate(package_payload(pid, name, price, active))


# -----------------------------------------------------------------------------
# Reloj falso
# -----------------------------------------------------------------------------

class FakeClock:
    """Reloj monotónico manual; sleep() avanza el tiempo sin esperar."""

    def __init__(self, start: float = 0.0):
        self.now = start
        self.sleeps: List[float] = []

    def __call__(self) -> float:
        return self.now

    async def sleep(self, delay: float) -> None:
        self.sleeps.append(delay)
        self.now += delay
        await asyncio.sleep(0)


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


# -----------------------------------------------------------------------------
# Contexto de flujo
# -----------------------------------------------------------------------------

@pytest.fixture
def memory_store() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture
def flow_context(memory_store) -> FlowContext:
    return FlowContext(memory_store, "test-client")


@pytest.fixture
def pending_selection() -> PendingSelection:
    return PendingSelection(
        package_id="p1",
        package_name="Weekly",
        price=5000,
        currency="UGX",
        duration_days=7,
        phone_number=PHONE,
    )


@pytest.fixture
def payments_settings() -> PaymentsSettings:
    return PaymentsSettings(_env_file=None)


# -----------------------------------------------------------------------------
# Dobles HTTP de servicios externos
# -----------------------------------------------------------------------------

class FakeGateway:
    """Pasarela programable: initialize devuelve un handle, verify una secuencia."""

    def __init__(self, handle: str = "tx-abc"):
        self.handle = handle
        self.initialize_status = 200
        self.verify_statuses: List[str] = ["processing"]
        self.initialize_bodies: List[dict] = []
        self.verify_calls = 0

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if request.method == "POST" and path.endswith("/initialize"):
            payload = json.loads(request.content)
            self.initialize_bodies.append(payload)
            if self.initialize_status >= 400:
                return httpx.Response(self.initialize_status, text="Phone number not supported")
            return json_response(200, gateway_payload(self.handle, "processing", payload["reference"]))
        if request.method == "GET" and "/verify/" in path:
            self.verify_calls += 1
            idx = min(self.verify_calls - 1, len(self.verify_statuses) - 1)
            return json_response(200, gateway_payload(self.handle, self.verify_statuses[idx]))
        return httpx.Response(404, text="not found")


class FakeAccountService:
    """Servicio de cuentas con paquetes, login, subscribe y redeem."""

    def __init__(self):
        self.packages = [package_payload("p0", "Daily", 1000), package_payload("p1", "Weekly", 5000)]
        self.token = "tok-123"
        self.subscribe_calls: List[dict] = []
        self.subscribe_status = 200
        self.redeem_calls: List[dict] = []
        self.valid_codes = {"GOOD-CODE"}
        self.subscribed = False

    def _authorized(self, request: httpx.Request) -> bool:
        return request.headers.get("Authorization") == f"Bearer {self.token}"

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if path == "/subscriptions/packages":
            return json_response(200, self.packages)
        if path == "/auth/login":
            form = dict(httpx.QueryParams(request.content.decode()))
            if form.get("password") != "secret":
                return json_response(400, {"detail": "Incorrect username or password"})
            return json_response(200, {"access_token": self.token, "token_type": "bearer"})
        if not self._authorized(request):
            return json_response(401, {"detail": "Not authenticated"})
        if path == "/auth/me":
            return json_response(
                200,
                {"id": "u1", "email": "a@b.c", "username": "ann", "subscribed": self.subscribed},
            )
        if path == "/subscriptions/subscribe":
            body = json.loads(request.content)
            self.subscribe_calls.append(body)
            if self.subscribe_status >= 400:
                return json_response(
                    self.subscribe_status,
                    {"detail": [{"loc": ["body"], "msg": "Package not found", "type": "value_error"}]},
                )
            return json_response(200, subscription_payload(body["package_id"], body["phone_number"]))
        if path == "/subscriptions/redeem":
            body = json.loads(request.content)
            self.redeem_calls.append(body)
            if body["code"] not in self.valid_codes:
                return json_response(400, {"detail": "Invalid or expired code"})
            return json_response(
                200,
                {"message": "Code redeemed", "subscription": subscription_payload("p1", body["phone_number"])},
            )
        return json_response(404, {"detail": "Not Found"})


@pytest.fixture
def fake_gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def fake_accounts() -> FakeAccountService:
    return FakeAccountService()


def mock_client(base_url: str, handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
    return httpx.AsyncClient(base_url=base_url, transport=httpx.MockTransport(handler))


# -----------------------------------------------------------------------------
# App completa con dobles
# -----------------------------------------------------------------------------

@pytest.fixture
def fast_payments_settings() -> PaymentsSettings:
    """Intervalos cortos para recorrer el flujo real por HTTP."""
    return PaymentsSettings(
        _env_file=None,
        poll_interval_seconds=0.01,
        confirmation_timeout_seconds=1.0,
    )


@pytest.fixture
def content_handler() -> Dict[str, Any]:
    """Respuestas del API de contenido por path (las rutas de catálogo las rellenan)."""
    return {}


@pytest.fixture
def app(fake_gateway, fake_accounts, fast_payments_settings, content_handler):
    from pitbox.core.container import build_services
    from pitbox.main import create_app

    def _content(request: httpx.Request) -> httpx.Response:
        payload = content_handler.get(request.url.path)
        if payload is None:
            return json_response(404, {"detail": "Not Found"})
        return json_response(200, payload)

    async def factory():
        return await build_services(
            payments_settings=fast_payments_settings,
            clients={
                "gateway": mock_client(GATEWAY_URL, fake_gateway.handler),
                "accounts": mock_client(ACCOUNTS_URL, fake_accounts.handler),
                "content": mock_client(CONTENT_URL, _content),
            },
            store=MemoryKeyValueStore(),
        )

    return create_app(services_factory=factory)


@pytest.fixture
async def async_client(app) -> AsyncIterator[httpx.AsyncClient]:
    """Cliente HTTP con ciclo de vida completo (startup/shutdown)."""
    from asgi_lifespan import LifespanManager

    async with LifespanManager(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
            yield client


@pytest.fixture
def auth_headers(fake_accounts) -> Dict[str, str]:
    return {"Authorization": f"Bearer {fake_accounts.token}", "X-Client-Id": "device-1"}


async def wait_for_state(
    client: httpx.AsyncClient,
    flow_id: str,
    headers: Dict[str, str],
    states: set,
    timeout: float = 3.0,
) -> dict:
    """Consulta GET /activations/{id} hasta llegar a uno de `states`."""
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while True:
        resp = await client.get(f"/subscriptions/activations/{flow_id}", headers=headers)
        body = resp.json()
        if body["state"] in states or loop.time() > deadline:
            return body
        await asyncio.sleep(0.01)


@pytest.fixture
def selection_body() -> Optional[dict]:
    return {"package_id": "p1", "phone_number": "0700 000 000"}
