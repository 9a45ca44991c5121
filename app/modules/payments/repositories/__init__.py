# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/repositories/__init__.py

Punto de entrada de repositorios del módulo Payments.

Incluye:
- PaymentRepository
- StateDataRepository

Fecha: 2025-11-20
"""

from .payment_repository import PaymentRepository
from .state_data_repository import StateDataRepository

__all__ = [
    "PaymentRepository",
    "StateDataRepository",
]

# Fin del archivo backend/app/modules/payments/repositories/__init__.py
