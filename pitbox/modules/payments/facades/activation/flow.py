# -*- coding: utf-8 -*-
"""
pitbox/modules/payments/facades/activation/flow.py

Flujo de activación de suscripción por dinero móvil.

Orquesta:
1) Lectura de la PendingSelection (precondición de entrada)
2) initialize en la pasarela con una referencia única → 'confirming'
3) Un único loop async con deadline que consulta verify()
4) subscribe exactamente una vez cuando el pago está liquidado
5) Canje de voucher como camino alternativo (idle → success)

Estados: idle → processing → confirming → success | failed.
El estado 'failed' lleva un FailureKind; solo ACTIVATION no es reintentable.

El loop de polling es la única tarea en segundo plano de una instancia;
cancelarla (cancel(), estado terminal o apagado) detiene a la vez el
intervalo y la ventana de confirmación.

Autor: PitBox
Fecha: 2026-09-24
"""

from __future__ import annotations

import asyncio
import logging
import time
import uuid
from typing import Awaitable, Callable, List, Optional

from pitbox.modules.accounts import AccountClient, AccountServiceError
from pitbox.modules.accounts.schemas import SubscriptionResponse
from pitbox.modules.payments.context import FlowContext
from pitbox.modules.payments.enums import (
    ActivationPath,
    ActivationState,
    FailureKind,
    GatewayStatus,
    TransactionStatus,
    is_rejected,
    is_settled,
    validate_activation_transition,
)
from pitbox.modules.payments.gateway import GatewayError, PaymentGatewayClient
from pitbox.modules.payments.metrics import (
    activation_confirmation_seconds,
    activation_flows_started_total,
    activation_outcomes_total,
    activation_poll_results_total,
    activation_polling_flows,
    activation_subscribe_calls_total,
)
from pitbox.modules.payments.schemas import (
    ActivationSnapshot,
    PaymentTransaction,
    PendingSelection,
)
from pitbox.shared.config import PaymentsSettings, mask_phone
from pitbox.shared.utils import normalize_ug_phone
from .errors import (
    ActivationError,
    ActivationFailure,
    FlowPathConflict,
    InitializationError,
    PaymentFailure,
    PaymentTimeout,
    SelectionMissing,
    TransientPollError,
)
from .polling import PollPolicy

logger = logging.getLogger(__name__)

Clock = Callable[[], float]
Sleep = Callable[[float], Awaitable[None]]


def new_reference() -> str:
    return str(uuid.uuid4())


class ActivationFlow:
    """Una instancia del flujo de activación (un intento de compra)."""

    def __init__(
        self,
        *,
        context: FlowContext,
        gateway: PaymentGatewayClient,
        accounts: AccountClient,
        settings: PaymentsSettings,
        policy: Optional[PollPolicy] = None,
        flow_id: Optional[str] = None,
        clock: Clock = time.monotonic,
        sleep: Sleep = asyncio.sleep,
        reference_factory: Callable[[], str] = new_reference,
        on_notice: Optional[Callable[[str], None]] = None,
    ):
        self.flow_id = flow_id or uuid.uuid4().hex
        self.context = context
        self._gateway = gateway
        self._accounts = accounts
        self._settings = settings
        self._policy = policy or PollPolicy.from_settings(settings)
        self._clock = clock
        self._sleep = sleep
        self._reference_factory = reference_factory
        self._on_notice = on_notice

        self.state = ActivationState.IDLE
        self.path: Optional[ActivationPath] = None
        self.error: Optional[ActivationError] = None
        self.selection: Optional[PendingSelection] = None
        self.transaction: Optional[PaymentTransaction] = None
        self.subscription: Optional[SubscriptionResponse] = None
        self.notices: List[str] = []

        self._started = False
        self._redeeming = False
        self._activation_started = False
        self._confirming_since: Optional[float] = None
        self._poll_task: Optional[asyncio.Task] = None
        self._activation_task: Optional[asyncio.Task] = None

    # ------------------------------------------------------------------
    # Propiedades
    # ------------------------------------------------------------------

    @property
    def failure_kind(self) -> Optional[FailureKind]:
        return self.error.kind if self.error else None

    @property
    def poll_task(self) -> Optional[asyncio.Task]:
        return self._poll_task

    @property
    def activation_task(self) -> Optional[asyncio.Task]:
        return self._activation_task

    @property
    def is_polling(self) -> bool:
        return self._poll_task is not None and not self._poll_task.done()

    def snapshot(self) -> ActivationSnapshot:
        return ActivationSnapshot(
            flow_id=self.flow_id,
            state=self.state,
            path=self.path,
            failure_kind=self.failure_kind,
            message=self.error.message if self.error else None,
            retryable=bool(self.error and self.error.retryable),
            contact_support=bool(self.error and self.error.contact_support),
            notices=list(self.notices),
            transaction=self.transaction.model_copy() if self.transaction else None,
            subscription_id=self.subscription.id if self.subscription else None,
            package_id=self.selection.package_id if self.selection else None,
            package_name=self.selection.package_name if self.selection else None,
        )

    # ------------------------------------------------------------------
    # Internos
    # ------------------------------------------------------------------

    def _notify(self, message: str) -> None:
        self.notices.append(message)
        if self._on_notice is not None:
            self._on_notice(message)

    def _claim_path(self, path: ActivationPath) -> None:
        if self.path is not None and self.path is not path:
            raise FlowPathConflict(self.flow_id, self.path.value, path.value)
        self.path = path

    def _load_selection(self) -> PendingSelection:
        selection = self.context.get_selection()
        if selection is None or not selection.is_complete:
            raise SelectionMissing()
        return selection

    def _transition(self, to_state: ActivationState) -> None:
        validate_activation_transition(self.state, to_state, self.failure_kind)
        logger.info(f"[flow {self.flow_id}] {self.state.value} → {to_state.value}")
        self.state = to_state
        if to_state.is_terminal:
            self._on_terminal()

    def _on_terminal(self) -> None:
        kind = self.failure_kind.value if self.state is ActivationState.FAILED and self.error else "none"
        activation_outcomes_total.labels(state=self.state.value, failure_kind=kind).inc()
        if self._confirming_since is not None:
            activation_confirmation_seconds.observe(max(0.0, self._clock() - self._confirming_since))
            self._confirming_since = None
        self._cancel_polling()

    def _fail(self, error: ActivationError) -> None:
        self.error = error
        self._transition(ActivationState.FAILED)
        log = logger.error if error.contact_support else logger.warning
        log(
            f"[flow {self.flow_id}] fallo '{error.kind.value}': {error.message}"
            + (f" | detalle: {error.detail}" if error.detail else "")
        )

    def _cancel_polling(self) -> bool:
        task = self._poll_task
        if task is None or task.done() or self._activation_started:
            # Con el pago liquidado, subscribe debe terminar
            return False
        if task is asyncio.current_task():
            # El propio loop termina al ver el estado terminal
            return False
        task.cancel()
        return True

    # ------------------------------------------------------------------
    # Camino de pago
    # ------------------------------------------------------------------

    async def start(self) -> ActivationSnapshot:
        """
        Arranca el pago: initialize y, si es aceptado, lanza el loop
        de confirmación en segundo plano.

        Raises:
            SelectionMissing: no hay plan pendiente completo (nada arranca).
            FlowPathConflict: la instancia ya usa el camino de canje.
        """
        if self._started:
            logger.warning(f"[flow {self.flow_id}] start() repetido ignorado")
            return self.snapshot()

        selection = self._load_selection()
        self._claim_path(ActivationPath.PAYMENT)
        self._started = True
        self.selection = selection
        activation_flows_started_total.labels(path=ActivationPath.PAYMENT.value).inc()

        await self._initialize()
        return self.snapshot()

    async def _initialize(self) -> None:
        selection = self.selection
        self._transition(ActivationState.PROCESSING)
        self._activation_started = False

        # 1) Referencia única del cliente
        reference = self._reference_factory()
        self.transaction = PaymentTransaction(
            reference=reference,
            amount=selection.price,
            phone_number=selection.phone_number,
        )

        # 2) initialize en la pasarela
        try:
            tx = await self._gateway.initialize(
                amount=selection.price,
                phone_number=selection.phone_number,
                reference=reference,
                country=self._settings.payment_country,
                description=self._settings.payment_description_template.format(
                    plan=selection.package_name or selection.package_id
                ),
                callback_url=self._settings.payment_callback_url,
            )
        except GatewayError as e:
            self.transaction.status = TransactionStatus.FAILED
            self._fail(InitializationError(e.message))
            return

        # 3) Handle de la pasarela → confirming
        self.transaction.uuid = tx.transaction_handle
        self.transaction.status = TransactionStatus.CONFIRMING
        self._transition(ActivationState.CONFIRMING)
        self._confirming_since = self._clock()
        self._notify(
            f"A mobile money prompt was sent to {selection.phone_number}. "
            "Approve it on your phone to complete the payment."
        )

        # 4) Loop de confirmación (única tarea de la instancia)
        self._poll_task = asyncio.create_task(
            self._confirm_loop(tx.transaction_handle, self._confirming_since),
            name=f"activation-poll-{self.flow_id}",
        )

    async def _confirm_loop(self, handle: str, confirming_since: float) -> None:
        deadline = confirming_since + self._policy.timeout
        activation_polling_flows.inc()
        try:
            for delay in self._policy.delays():
                remaining = deadline - self._clock()
                if remaining <= 0:
                    break
                await self._sleep(min(delay, remaining))
                if self.state is not ActivationState.CONFIRMING:
                    return

                remaining = deadline - self._clock()
                if remaining <= 0:
                    break
                try:
                    tx = await asyncio.wait_for(self._gateway.verify(handle), timeout=remaining)
                except (GatewayError, asyncio.TimeoutError) as e:
                    activation_poll_results_total.labels(result="error").inc()
                    reason = getattr(e, "message", None) or type(e).__name__
                    logger.warning(f"[flow {self.flow_id}] {TransientPollError(handle, reason)}")
                    continue

                await self.apply_gateway_status(tx.status, source="poll")
                if self.state is not ActivationState.CONFIRMING or self._activation_started:
                    return

            self._expire()
        except asyncio.CancelledError:
            logger.debug(f"[flow {self.flow_id}] loop de confirmación cancelado")
            raise
        finally:
            activation_polling_flows.dec()

    def _expire(self) -> None:
        if self.state is not ActivationState.CONFIRMING or self._activation_started:
            return
        self.transaction.status = TransactionStatus.TIMEOUT
        self._fail(PaymentTimeout(self._policy.timeout))

    async def apply_gateway_status(self, status: Optional[str], *, source: str = "poll") -> ActivationState:
        """
        Aplica un estado reportado por la pasarela (poll o callback).

        Solo actúa en 'confirming' y antes de iniciar la activación, de modo
        que subscribe se invoca como mucho una vez por instancia. Con el pago
        liquidado, subscribe corre en su propia tarea protegida con shield:
        cancel(), abandon() o el apagado no la interrumpen.
        """
        parsed = GatewayStatus.parse(status)
        if source == "poll":
            activation_poll_results_total.labels(result=parsed.value if parsed else "unknown").inc()

        if self.state is not ActivationState.CONFIRMING or self._activation_started:
            logger.debug(
                f"[flow {self.flow_id}] estado '{status}' ({source}) ignorado en {self.state.value}"
            )
            return self.state

        if is_settled(status):
            self._cancel_polling()
            self._activation_started = True
            # Tarea propia: cancelar el polling o el request no interrumpe subscribe
            self._activation_task = asyncio.create_task(
                self._activate(), name=f"activation-subscribe-{self.flow_id}"
            )
            await asyncio.shield(self._activation_task)
        elif is_rejected(status):
            self.transaction.status = TransactionStatus.FAILED
            self._fail(PaymentFailure(f"gateway reported '{status}' via {source}"))
        else:
            logger.debug(f"[flow {self.flow_id}] pago aún pendiente ('{status}', {source})")
        return self.state

    async def _activate(self) -> None:
        selection = self.selection
        self.transaction.status = TransactionStatus.SUCCESS
        logger.info(
            f"✅ [flow {self.flow_id}] pago liquidado, creando suscripción "
            f"package={selection.package_id} phone={mask_phone(selection.phone_number)}"
        )
        try:
            subscription = await self._accounts.subscribe(selection.package_id, selection.phone_number)
        except AccountServiceError as e:
            activation_subscribe_calls_total.labels(success="false").inc()
            self._fail(ActivationFailure(e.message))
            return

        activation_subscribe_calls_total.labels(success="true").inc()
        self._complete(subscription, "Subscription activated. Enjoy PitBox!")

    def _complete(self, subscription: SubscriptionResponse, notice: str) -> None:
        self.subscription = subscription
        self.context.clear_selection()
        self.context.set_premium(True)
        self._transition(ActivationState.SUCCESS)
        self._notify(notice)

    # ------------------------------------------------------------------
    # Acciones del usuario
    # ------------------------------------------------------------------

    async def retry(self) -> ActivationSnapshot:
        """
        Reinicia desde 'processing' con nueva referencia e initialize.

        Raises:
            ValueError: el estado actual no admite reintento (incluye ACTIVATION).
            SelectionMissing: la selección ya no existe.
        """
        validate_activation_transition(self.state, ActivationState.PROCESSING, self.failure_kind)
        self.selection = self._load_selection()
        self.error = None
        logger.info(f"[flow {self.flow_id}] reintento del pago")
        await self._initialize()
        return self.snapshot()

    def cancel(self) -> bool:
        """
        Detiene el polling (teardown). No cambia el estado.

        Si el pago ya está liquidado no cancela nada: la creación de la
        suscripción siempre llega a un estado terminal.
        """
        cancelled = self._cancel_polling()
        if cancelled:
            logger.info(f"[flow {self.flow_id}] polling cancelado")
        return cancelled

    def abandon(self) -> None:
        """Cancela y borra la selección para volver a elegir plan."""
        self.cancel()
        self.context.clear_selection()
        logger.info(f"[flow {self.flow_id}] flujo abandonado, selección borrada")

    async def wait(self) -> ActivationSnapshot:
        """Espera a que terminen el loop de confirmación y la activación."""
        task = self._poll_task
        if task is not None and not task.done():
            await asyncio.wait({task})
        task = self._activation_task
        if task is not None and not task.done():
            await asyncio.wait({task})
        return self.snapshot()

    # ------------------------------------------------------------------
    # Camino de canje
    # ------------------------------------------------------------------

    async def redeem(self, code: str, phone_number: Optional[str] = None) -> ActivationSnapshot:
        """
        Canjea un voucher: idle → success sin pasar por la pasarela.

        Raises:
            FlowPathConflict: la instancia ya inició el camino de pago.
            SelectionMissing: no hay teléfono (ni explícito ni en la selección).
            InvalidCodeError / AccountServiceError: el servicio rechazó el canje.
            ValueError: canje ya en curso o estado no 'idle'.
        """
        self._claim_path(ActivationPath.REDEMPTION)
        if self._redeeming:
            raise ValueError("Redemption already in progress")
        validate_activation_transition(self.state, ActivationState.SUCCESS)

        selection = self.context.get_selection()
        phone = normalize_ug_phone(phone_number) if phone_number else None
        if not phone and selection is not None:
            phone = selection.phone_number
        if not phone:
            self.path = None
            raise SelectionMissing("Please enter your phone number")

        self._redeeming = True
        activation_flows_started_total.labels(path=ActivationPath.REDEMPTION.value).inc()
        try:
            result = await self._accounts.redeem(code, phone)
        except AccountServiceError as e:
            # Sin nada en vuelo: el usuario puede probar otro código o pagar
            self.path = None
            logger.warning(f"[flow {self.flow_id}] canje rechazado: {e.message}")
            raise
        finally:
            self._redeeming = False

        self.selection = selection
        logger.info(f"🎟️ [flow {self.flow_id}] voucher canjeado phone={mask_phone(phone)}")
        self._complete(result.subscription, result.message or "Code redeemed successfully.")
        return self.snapshot()


__all__ = ["ActivationFlow", "new_reference"]

# Fin del archivo pitbox/modules/payments/facades/activation/flow.py
