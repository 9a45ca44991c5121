# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/payment_methods/factory.py

Registro de métodos de pago alternativos y fábrica por tx variant.

Fecha: 2025-12-02
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional

from app.modules.payments.constants import SEPA
from .payment_method import PaymentMethod


class PaymentMethodNotSupported(ValueError):
    """El tx variant no corresponde a ningún método de pago registrado."""


# =============================================================================
# MÉTODOS REGISTRADOS
# =============================================================================

_RECURRING_ALL = dict(
    supports_recurring=True,
    supports_card_on_file=True,
    supports_subscription=True,
    supports_unscheduled_card_on_file=True,
)

DEFAULT_PAYMENT_METHODS: tuple[PaymentMethod, ...] = (
    PaymentMethod(SEPA, "SEPA Direct Debit", supports_auto_capture=False, **_RECURRING_ALL),
    PaymentMethod("paypal", "PayPal", **_RECURRING_ALL),
    PaymentMethod("klarna", "Klarna Pay Later", supports_recurring=True, supports_subscription=True, supports_auto_capture=False),
    PaymentMethod("klarna_account", "Klarna Slice It", supports_recurring=True, supports_subscription=True, supports_auto_capture=False),
    PaymentMethod("klarna_paynow", "Klarna Pay Now", supports_recurring=True, supports_subscription=True),
    PaymentMethod("ideal", "iDEAL"),
    PaymentMethod("directEbanking", "Sofort"),
    PaymentMethod("bcmc_mobile", "Bancontact Mobile"),
    PaymentMethod("twint", "TWINT", **_RECURRING_ALL),
    PaymentMethod("applepay", "Apple Pay", is_wallet=True, **_RECURRING_ALL),
    PaymentMethod("googlepay", "Google Pay", is_wallet=True, **_RECURRING_ALL),
    PaymentMethod("amazonpay", "Amazon Pay", is_wallet=True, **_RECURRING_ALL),
)


class PaymentMethodFactory:
    """Resuelve el PaymentMethod de un tx variant (brand_code)."""

    def __init__(self, methods: Optional[Iterable[PaymentMethod]] = None) -> None:
        self._methods: Dict[str, PaymentMethod] = {
            method.tx_variant: method
            for method in (methods if methods is not None else DEFAULT_PAYMENT_METHODS)
        }

    def create_payment_method(self, tx_variant: str) -> PaymentMethod:
        """
        Devuelve el método registrado para `tx_variant`.

        Raises:
            PaymentMethodNotSupported: Si el tx variant no está registrado
        """
        if not isinstance(tx_variant, str):
            raise PaymentMethodNotSupported(f"Unsupported payment method: {tx_variant!r}")
        try:
            return self._methods[tx_variant]
        except KeyError:
            raise PaymentMethodNotSupported(f"Unsupported payment method: {tx_variant!r}") from None

    def is_supported(self, tx_variant: str) -> bool:
        return isinstance(tx_variant, str) and tx_variant in self._methods

    def supported_variants(self) -> list[str]:
        return sorted(self._methods)


__all__ = [
    "PaymentMethodFactory",
    "PaymentMethodNotSupported",
    "DEFAULT_PAYMENT_METHODS",
]

# Fin del archivo backend/app/modules/payments/payment_methods/factory.py
