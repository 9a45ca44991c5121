# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/facades/checkout/__init__.py

Punto de entrada del submódulo de checkout del módulo Payments.

Fecha: 2025-12-02
"""

from .payment_information import (
    PaymentNotFound,
    assign_payment_information,
    to_payment_information_response,
)

__all__ = [
    "PaymentNotFound",
    "assign_payment_information",
    "to_payment_information_response",
]

# Fin del archivo backend/app/modules/payments/facades/checkout/__init__.py
