# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/validators/__init__.py

Validadores de payloads del checkout.
"""

from .data_array_validator import DataArrayValidator
from .checkout_state_data_validator import CheckoutStateDataValidator, STATE_DATA_ROOT_KEYS

__all__ = [
    "DataArrayValidator",
    "CheckoutStateDataValidator",
    "STATE_DATA_ROOT_KEYS",
]
