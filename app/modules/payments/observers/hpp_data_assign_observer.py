# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/observers/hpp_data_assign_observer.py

Asignación de datos adicionales del método de pago alojado (HPP).

Pasos:
1. Leer additional_data del payload (si no es un dict, no se hace nada)
2. Filtrar por WHITELIST de claves raíz
3. Resolver state data: inline (JSON) o almacenado por quote_id
4. Validar state data, guardarlo en StateDataService y quitarlo del payload
5. SEPA: conservar iban / ownerName del sub-objeto paymentMethod
6. Escribir additional_data (+ datos SEPA) en additional_information
7. brand_code (texto, máx. 64) → cc_type; activar vault si el método admite recurrencia

Los problemas del payload nunca elevan excepción: se omiten y se registran.

Fecha: 2025-12-02
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping, Optional

from app.shared.events import Event
from app.modules.payments.constants import (
    APPROVED_ADDITIONAL_DATA_KEYS,
    BRAND_CODE,
    CC_TYPE_MAX_LENGTH,
    IS_ACTIVE_CODE,
    KEY_ADDITIONAL_DATA,
    SEPA,
    SEPA_IBAN,
    SEPA_OWNER_NAME,
    STATE_DATA,
    STATE_DATA_PAYMENT_METHOD,
)
from app.modules.payments.models.payment_info import PaymentInfo
from app.modules.payments.payment_methods import PaymentMethodFactory
from app.modules.payments.services.state_data_service import StateDataService
from app.modules.payments.services.vault_service import VaultService
from app.modules.payments.validators import CheckoutStateDataValidator, DataArrayValidator
from .abstract_data_assign_observer import AbstractDataAssignObserver

logger = logging.getLogger(__name__)


class HppDataAssignObserver(AbstractDataAssignObserver):
    """Observer de payment_method_assign_data_<hpp>."""

    def __init__(
        self,
        checkout_state_data_validator: CheckoutStateDataValidator,
        state_data_service: StateDataService,
        payment_method_factory: PaymentMethodFactory,
        vault_service: VaultService,
        *,
        sepa_brand_code: str = SEPA,
    ) -> None:
        self.checkout_state_data_validator = checkout_state_data_validator
        self.state_data_service = state_data_service
        self.payment_method_factory = payment_method_factory
        self.vault_service = vault_service
        self.sepa_brand_code = sepa_brand_code

    def execute(self, event: Event) -> None:
        additional_data_to_save: Dict[str, Any] = {}

        data = self.read_data_argument(event)
        payment_info = self.read_payment_model_argument(event)

        additional_data = data.get_data(KEY_ADDITIONAL_DATA)
        if not isinstance(additional_data, Mapping):
            logger.debug(f"[hpp] {event.name}: additional_data ausente o no es un objeto; sin cambios")
            return

        additional_data = DataArrayValidator.get_array_only_with_approved_keys(
            additional_data,
            APPROVED_ADDITIONAL_DATA_KEYS,
        )

        quote_id = payment_info.quote_id

        # State data del frontend o, en su defecto, el almacenado del quote
        if additional_data.get(STATE_DATA):
            state_data = self._decode_state_data(additional_data[STATE_DATA])
        else:
            state_data = self.state_data_service.load_state_data(quote_id)

        if state_data:
            state_data = self.checkout_state_data_validator.get_validated_additional_data(state_data)
            self.state_data_service.set_state_data(state_data, quote_id)

        brand_code = additional_data.get(BRAND_CODE)
        if brand_code == self.sepa_brand_code:
            additional_data_to_save = self._get_sepa_additional_data_to_save(state_data)

        additional_data.pop(STATE_DATA, None)

        for key, value in {**additional_data, **additional_data_to_save}.items():
            payment_info.set_additional_information(key, value)

        brand_code = self._usable_brand_code(brand_code)
        if brand_code:
            payment_info.set_cc_type(brand_code)
            self._activate_vault_if_allowed(payment_info, brand_code)

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #
    @staticmethod
    def _decode_state_data(raw: Any) -> Dict[str, Any]:
        """JSON (str/bytes) o dict ya decodificado → dict; cualquier otra cosa → {}."""
        if isinstance(raw, Mapping):
            return dict(raw)

        if isinstance(raw, (str, bytes, bytearray)):
            try:
                decoded = json.loads(raw)
            except ValueError:
                logger.warning("[hpp] stateData no es JSON válido; se ignora")
                return {}
            if isinstance(decoded, dict):
                return decoded
            logger.warning("[hpp] stateData no es un objeto JSON; se ignora")
            return {}

        logger.warning(f"[hpp] stateData con tipo no soportado ({type(raw).__name__}); se ignora")
        return {}

    @staticmethod
    def _get_sepa_additional_data_to_save(state_data: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """Datos necesarios para tokenizar un mandato SEPA."""
        to_save: Dict[str, Any] = {}

        payment_method = (state_data or {}).get(STATE_DATA_PAYMENT_METHOD)
        if not isinstance(payment_method, Mapping):
            return to_save

        if SEPA_IBAN in payment_method:
            to_save[SEPA_IBAN] = payment_method[SEPA_IBAN]

        if SEPA_OWNER_NAME in payment_method:
            to_save[SEPA_OWNER_NAME] = payment_method[SEPA_OWNER_NAME]

        return to_save

    @staticmethod
    def _usable_brand_code(brand_code: Any) -> Optional[str]:
        """brand_code apto para cc_type; cualquier otro valor cuenta como ausente."""
        if brand_code is None:
            return None
        if not isinstance(brand_code, str):
            logger.warning(f"[hpp] brand_code con tipo no soportado ({type(brand_code).__name__}); se ignora")
            return None
        if len(brand_code) > CC_TYPE_MAX_LENGTH:
            logger.warning(f"[hpp] brand_code de {len(brand_code)} caracteres excede {CC_TYPE_MAX_LENGTH}; se ignora")
            return None
        return brand_code

    def _activate_vault_if_allowed(self, payment_info: PaymentInfo, brand_code: str) -> None:
        if not self.payment_method_factory.is_supported(brand_code):
            logger.info(f"[hpp] brand_code {brand_code!r} sin método registrado; vault no evaluado")
            return

        payment_method = self.payment_method_factory.create_payment_method(brand_code)
        if self.vault_service.allow_recurring_on_payment_method(payment_method):
            payment_info.set_additional_information(IS_ACTIVE_CODE, True)
            logger.info(f"[hpp] Vault activado para {payment_method.label}")


__all__ = ["HppDataAssignObserver"]

# Fin del archivo backend/app/modules/payments/observers/hpp_data_assign_observer.py
