# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/models/__init__.py

Punto de entrada de modelos ORM del módulo Payments.

Se exportan:
- Payment (tabla payments)
- CheckoutStateData (tabla checkout_state_data)
- PaymentInfo (Protocol que consumen los observers)

Fecha: 2025-12-02
"""

from __future__ import annotations

from .payment_info import PaymentInfo
from .payment_models import Payment
from .state_data_models import CheckoutStateData

__all__ = [
    "Payment",
    "CheckoutStateData",
    "PaymentInfo",
]

# Fin del archivo backend/app/modules/payments/models/__init__.py
