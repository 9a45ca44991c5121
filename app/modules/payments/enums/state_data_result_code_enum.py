# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/enums/state_data_result_code_enum.py

Result codes del proveedor relevantes para el ciclo de vida del state data.

Fecha: 02/12/2025
"""

from enum import StrEnum


class ResultCode(StrEnum):
    """Result codes devueltos por el proveedor tras /payments."""

    AUTHORISED = "Authorised"
    REFUSED = "Refused"
    PENDING = "Pending"
    RECEIVED = "Received"
    CANCELLED = "Cancelled"
    ERROR = "Error"
    REDIRECT_SHOPPER = "RedirectShopper"
    IDENTIFY_SHOPPER = "IdentifyShopper"
    CHALLENGE_SHOPPER = "ChallengeShopper"
    PRESENT_TO_SHOPPER = "PresentToShopper"


# Tras estos result codes el state data almacenado del quote ya no se necesita
CLEANUP_RESULT_CODES = frozenset({ResultCode.AUTHORISED})


__all__ = ["ResultCode", "CLEANUP_RESULT_CODES"]


# Fin del archivo backend/app/modules/payments/enums/state_data_result_code_enum.py
