# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/payment_methods/payment_method.py

Descriptor de un método de pago alternativo (tx variant) y sus capacidades.

Fecha: 2025-12-02
"""

from __future__ import annotations

from dataclasses import dataclass

from app.modules.payments.enums import RecurringTokenType


@dataclass(frozen=True)
class PaymentMethod:
    """
    Capacidades de un método de pago identificado por su tx variant.

    - supports_recurring: puede almacenarse en el vault para reutilizarse.
    - supports_card_on_file / subscription / unscheduled_card_on_file:
      modelos de recurrencia que el proveedor acepta para el token.
    - is_wallet: wallet (Apple Pay, Google Pay...) en vez de método bancario.
    - supports_auto_capture: el proveedor captura sin paso manual.
    """

    tx_variant: str
    label: str
    supports_recurring: bool = False
    supports_card_on_file: bool = False
    supports_subscription: bool = False
    supports_unscheduled_card_on_file: bool = False
    is_wallet: bool = False
    supports_auto_capture: bool = True

    def supports_token_type(self, token_type: RecurringTokenType) -> bool:
        """Indica si el método admite el modelo de recurrencia `token_type`."""
        if token_type == RecurringTokenType.CARD_ON_FILE:
            return self.supports_card_on_file
        if token_type == RecurringTokenType.SUBSCRIPTION:
            return self.supports_subscription
        if token_type == RecurringTokenType.UNSCHEDULED_CARD_ON_FILE:
            return self.supports_unscheduled_card_on_file
        return False


__all__ = ["PaymentMethod"]

# Fin del archivo backend/app/modules/payments/payment_methods/payment_method.py
