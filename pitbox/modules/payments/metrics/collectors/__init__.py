# -*- coding: utf-8 -*-
"""
pitbox/modules/payments/metrics/collectors/__init__.py

Autor: PitBox
Fecha: 2026-09-23
"""

from .activation_collectors import *  # noqa: F401,F403
from .activation_collectors import __all__  # noqa: F401
