# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/services/state_data_service.py

Servicio de state data por quote.

Flujos cubiertos:
- Guardar en memoria el state data validado de la petición (por quote)
- Recuperar el state data almacenado del quote (fallback del checkout)
- Persistir state data enviado antes del place order
- Limpiar el state data almacenado cuando el pago queda autorizado

El almacén en memoria vive lo que vive la instancia (una por petición).

Fecha: 2025-12-02
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from app.modules.payments.constants import STATE_DATA_PAYMENT_METHOD
from app.modules.payments.enums import CLEANUP_RESULT_CODES
from app.modules.payments.repositories.state_data_repository import StateDataRepository

logger = logging.getLogger(__name__)


class StateDataService:
    """
    Punto único para el state data del checkout.

    Sin sesión de base de datos solo opera en memoria: las lecturas de
    respaldo devuelven {} y las escrituras persistentes no están disponibles.
    """

    def __init__(
        self,
        session: Optional[Session] = None,
        state_data_repo: Optional[StateDataRepository] = None,
    ) -> None:
        self.session = session
        self.state_data_repo = state_data_repo or StateDataRepository()
        self._state_data: Dict[int, Dict[str, Any]] = {}

    # ------------------------------------------------------------------ #
    # Almacén en memoria (por petición)
    # ------------------------------------------------------------------ #
    def set_state_data(self, state_data: Dict[str, Any], quote_id: Optional[int]) -> None:
        if quote_id is None:
            logger.debug("[state_data] Pago sin quote_id; state data no almacenado")
            return
        self._state_data[quote_id] = dict(state_data)
        logger.debug(f"[state_data] Quote {quote_id}: {len(state_data)} clave(s) almacenadas")

    def get_state_data(self, quote_id: Optional[int]) -> Dict[str, Any]:
        if quote_id is None:
            return {}
        return dict(self._state_data.get(quote_id, {}))

    def get_payment_method_variant(self, quote_id: Optional[int]) -> Optional[str]:
        """tx variant del método de pago (paymentMethod.type)."""
        payment_method = self.get_state_data(quote_id).get(STATE_DATA_PAYMENT_METHOD)
        if isinstance(payment_method, dict):
            return payment_method.get("type")
        return None

    def get_stored_payment_method_id(self, quote_id: Optional[int]) -> Optional[str]:
        """ID del método almacenado (paymentMethod.storedPaymentMethodId)."""
        payment_method = self.get_state_data(quote_id).get(STATE_DATA_PAYMENT_METHOD)
        if isinstance(payment_method, dict):
            return payment_method.get("storedPaymentMethodId")
        return None

    # ------------------------------------------------------------------ #
    # Persistencia (tabla checkout_state_data)
    # ------------------------------------------------------------------ #
    def load_state_data(self, quote_id: Optional[int]) -> Dict[str, Any]:
        """State data almacenado del quote, combinado; {} si no hay."""
        if self.session is None or quote_id is None:
            return {}
        return self.state_data_repo.get_state_data_with_quote_id(self.session, quote_id)

    def save_state_data(self, state_data: Dict[str, Any], quote_id: int) -> None:
        if self.session is None:
            raise RuntimeError("StateDataService sin sesión: no se puede persistir state data")
        self.state_data_repo.add_for_quote(self.session, quote_id, state_data)
        logger.info(f"[state_data] State data persistido para quote {quote_id}")

    def clean_quote_state_data(self, quote_id: int, result_code: str) -> int:
        """
        Elimina el state data almacenado del quote si `result_code` es final.

        Returns:
            Número de filas eliminadas
        """
        if result_code not in CLEANUP_RESULT_CODES or self.session is None:
            return 0

        deleted = self.state_data_repo.delete_by_quote_id(self.session, quote_id)
        self._state_data.pop(quote_id, None)
        logger.info(f"[state_data] Quote {quote_id}: {deleted} fila(s) eliminadas tras {result_code}")
        return deleted


__all__ = ["StateDataService"]

# Fin del archivo backend/app/modules/payments/services/state_data_service.py
