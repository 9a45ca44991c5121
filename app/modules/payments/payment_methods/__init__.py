# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/payment_methods/__init__.py

Métodos de pago alternativos y su fábrica.
"""

from .payment_method import PaymentMethod
from .factory import PaymentMethodFactory, PaymentMethodNotSupported, DEFAULT_PAYMENT_METHODS

__all__ = [
    "PaymentMethod",
    "PaymentMethodFactory",
    "PaymentMethodNotSupported",
    "DEFAULT_PAYMENT_METHODS",
]
