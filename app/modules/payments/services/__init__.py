# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/services/__init__.py

Servicios del módulo Payments.

Incluye:
- StateDataService
- VaultService
"""

from .state_data_service import StateDataService
from .vault_service import VaultService

__all__ = [
    "StateDataService",
    "VaultService",
]
