# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/schemas/__init__.py

Punto de entrada para los esquemas Pydantic del módulo Payments.
"""

from __future__ import annotations

from .payment_information_schemas import (
    PaymentInformationRequest,
    PaymentInformationResponse,
)

__all__ = [
    "PaymentInformationRequest",
    "PaymentInformationResponse",
]
