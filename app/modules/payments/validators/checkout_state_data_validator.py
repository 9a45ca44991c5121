# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/validators/checkout_state_data_validator.py

Validación del state data que envía el componente de checkout del frontend.

El state data es un objeto opaco y no confiable. Antes de reenviarlo al
proveedor se reduce a las claves raíz que la API /payments acepta.

Fecha: 2025-12-02
"""

from __future__ import annotations

import logging
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional

from .data_array_validator import DataArrayValidator

logger = logging.getLogger(__name__)


# =============================================================================
# CLAVES RAÍZ PERMITIDAS EN STATE DATA
# =============================================================================

STATE_DATA_ROOT_KEYS: FrozenSet[str] = frozenset({
    "paymentMethod",
    "billingAddress",
    "deliveryAddress",
    "riskData",
    "shopperName",
    "dateOfBirth",
    "telephoneNumber",
    "shopperEmail",
    "countryCode",
    "socialSecurityNumber",
    "browserInfo",
    "installments",
    "storePaymentMethod",
    "conversionId",
    "paymentData",
    "details",
    "origin",
    "order",
    "giftcard",
})


class CheckoutStateDataValidator:
    """Reduce el state data a las claves raíz aprobadas."""

    def __init__(self, root_keys: Optional[Iterable[str]] = None) -> None:
        self.root_keys = frozenset(root_keys) if root_keys is not None else STATE_DATA_ROOT_KEYS

    def get_validated_additional_data(self, state_data: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """
        Devuelve el state data filtrado.

        Args:
            state_data: State data decodificado (None o vacío → {})

        Returns:
            Dict solo con claves raíz aprobadas
        """
        if not state_data:
            return {}

        validated = DataArrayValidator.get_array_only_with_approved_keys(state_data, self.root_keys)

        dropped = len(state_data) - len(validated) if isinstance(state_data, Mapping) else 0
        if dropped:
            logger.debug(f"[state_data] {dropped} clave(s) raíz no aprobadas descartadas")

        return validated


__all__ = ["CheckoutStateDataValidator", "STATE_DATA_ROOT_KEYS"]

# Fin del archivo backend/app/modules/payments/validators/checkout_state_data_validator.py
