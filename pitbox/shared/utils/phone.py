# -*- coding: utf-8 -*-
"""
pitbox/shared/utils/phone.py

Normalización de teléfonos de Uganda al formato internacional +256.

Acepta entradas como "0712345678", "256712345678", "+256712345678",
"0712 345 678", "+256 712-345-678" o "712345678". Si el formato no se
reconoce se devuelve la entrada sin espacios ni guiones y la API de
cuentas hace la validación final.

Autor: PitBox
Fecha: 2026-09-19
"""

import re

UG_PREFIX = "+256"

_SEPARATORS = re.compile(r"[\s-]+")


def normalize_ug_phone(raw: str) -> str:
    """Devuelve el teléfono en formato +256XXXXXXXXX cuando es posible."""
    stripped = _SEPARATORS.sub("", raw or "")

    if stripped.startswith(UG_PREFIX):
        return stripped
    if stripped.startswith("256") and len(stripped) >= 12:
        return f"+{stripped}"
    if stripped.startswith("0") and len(stripped) >= 10:
        return f"{UG_PREFIX}{stripped[1:]}"
    if stripped.startswith("7") and len(stripped) >= 9:
        return f"{UG_PREFIX}{stripped}"
    return stripped


__all__ = ["normalize_ug_phone", "UG_PREFIX"]

# Fin del archivo pitbox/shared/utils/phone.py
