# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/enums/__init__.py

Superficie de exportación de enums del módulo Payments.

Incluye:
- RecurringTokenType
- ResultCode

Fecha: 02/12/2025
"""

from .recurring_token_type_enum import RecurringTokenType
from .state_data_result_code_enum import ResultCode, CLEANUP_RESULT_CODES

__all__ = [
    "RecurringTokenType",
    "ResultCode",
    "CLEANUP_RESULT_CODES",
]

# Fin del archivo backend/app/modules/payments/enums/__init__.py
