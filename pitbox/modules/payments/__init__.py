# -*- coding: utf-8 -*-
"""
pitbox/modules/payments/__init__.py

Módulo de pagos: pasarela de dinero móvil, contexto de flujo y
flujo de activación de suscripciones.

Los submódulos se importan explícitamente (pitbox.modules.payments.gateway,
.context, .facades.activation) para evitar ciclos con accounts.

Autor: PitBox
Fecha: 2026-09-21
"""

# Fin del archivo pitbox/modules/payments/__init__.py
