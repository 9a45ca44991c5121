# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/enums/recurring_token_type_enum.py

Enum de tipos de token recurrente para métodos de pago alternativos.

Fecha: 02/12/2025
"""

from enum import StrEnum


class RecurringTokenType(StrEnum):
    """Modelo de uso del token almacenado en el vault."""

    CARD_ON_FILE = "CardOnFile"
    SUBSCRIPTION = "Subscription"
    UNSCHEDULED_CARD_ON_FILE = "UnscheduledCardOnFile"


__all__ = ["RecurringTokenType"]


# Fin del archivo backend/app/modules/payments/enums/recurring_token_type_enum.py
