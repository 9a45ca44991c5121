# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/services/vault_service.py

Política de vault (tokenización) para métodos de pago alternativos.

Fecha: 2025-12-02
"""

from __future__ import annotations

import logging
from typing import Optional

from app.shared.config.settings_payments import PaymentsSettings, get_payments_settings
from app.modules.payments.enums import RecurringTokenType
from app.modules.payments.payment_methods import PaymentMethod

logger = logging.getLogger(__name__)


class VaultService:
    """Decide si un método de pago puede almacenarse para uso recurrente."""

    def __init__(self, settings: Optional[PaymentsSettings] = None) -> None:
        self.settings = settings or get_payments_settings()

    @property
    def token_type(self) -> RecurringTokenType:
        return RecurringTokenType(self.settings.alternative_payment_method_token_type)

    def allow_recurring_on_payment_method(self, payment_method: PaymentMethod) -> bool:
        """
        True solo si la tokenización de métodos alternativos está habilitada,
        el método admite recurrencia y admite el tipo de token configurado.
        """
        if not self.settings.store_alternative_payment_method_enabled:
            return False

        if not payment_method.supports_recurring:
            return False

        allowed = payment_method.supports_token_type(self.token_type)
        if not allowed:
            logger.debug(
                f"[vault] {payment_method.tx_variant} no admite token {self.token_type}"
            )
        return allowed


__all__ = ["VaultService"]

# Fin del archivo backend/app/modules/payments/services/vault_service.py
