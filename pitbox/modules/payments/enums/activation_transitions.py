# -*- coding: utf-8 -*-
"""
pitbox/modules/payments/enums/activation_transitions.py

Mapa de transiciones válidas para ActivationState.

Reglas de transición:
- idle       → processing | success   (inicio del pago o canje de voucher)
- processing → confirming | failed    (initialize aceptado o rechazado)
- confirming → success | failed       (pago liquidado/activado, rechazado, timeout)
- failed     → processing             (reintento; no aplica a fallos de activación)
- success    → (estado terminal, sin transiciones)

Autor: PitBox
Fecha: 2026-09-21
"""

from typing import Dict, Optional, Set

from .activation_state_enum import ActivationState, FailureKind


# Mapa de transiciones válidas: estado_origen → {estados_destino_permitidos}
VALID_ACTIVATION_TRANSITIONS: Dict[ActivationState, Set[ActivationState]] = {
    ActivationState.IDLE: {
        ActivationState.PROCESSING,
        ActivationState.SUCCESS,  # Canje de voucher
    },
    ActivationState.PROCESSING: {
        ActivationState.CONFIRMING,
        ActivationState.FAILED,
    },
    ActivationState.CONFIRMING: {
        ActivationState.SUCCESS,
        ActivationState.FAILED,
    },
    ActivationState.FAILED: {
        ActivationState.PROCESSING,  # Reintento desde cero
    },
    ActivationState.SUCCESS: set(),
}


def is_valid_activation_transition(
    from_state: ActivationState,
    to_state: ActivationState,
    failure: Optional[FailureKind] = None,
) -> bool:
    """
    Valida si una transición es permitida.

    Args:
        from_state: Estado actual.
        to_state: Estado destino.
        failure: Tipo de fallo cuando from_state es 'failed'.

    Returns:
        True si la transición es válida.
    """
    if to_state not in VALID_ACTIVATION_TRANSITIONS.get(from_state, set()):
        return False
    if from_state is ActivationState.FAILED and failure is not None:
        return failure.retryable
    return True


def get_allowed_activation_transitions(
    from_state: ActivationState,
    failure: Optional[FailureKind] = None,
) -> Set[ActivationState]:
    """Estados permitidos como destino desde un estado dado."""
    allowed = VALID_ACTIVATION_TRANSITIONS.get(from_state, set())
    if from_state is ActivationState.FAILED and failure is not None and not failure.retryable:
        return set()
    return set(allowed)


def validate_activation_transition(
    from_state: ActivationState,
    to_state: ActivationState,
    failure: Optional[FailureKind] = None,
) -> None:
    """
    Valida una transición, lanzando excepción si no es válida.

    Raises:
        ValueError: Si la transición no es válida.
    """
    if not is_valid_activation_transition(from_state, to_state, failure):
        allowed = get_allowed_activation_transitions(from_state, failure)
        allowed_str = ", ".join(sorted(s.value for s in allowed)) if allowed else "ninguno"
        raise ValueError(
            f"Transición de activación inválida: '{from_state.value}' → '{to_state.value}'. "
            f"Transiciones permitidas desde '{from_state.value}': {allowed_str}"
        )


__all__ = [
    "VALID_ACTIVATION_TRANSITIONS",
    "is_valid_activation_transition",
    "get_allowed_activation_transitions",
    "validate_activation_transition",
]

# Fin del archivo pitbox/modules/payments/enums/activation_transitions.py
