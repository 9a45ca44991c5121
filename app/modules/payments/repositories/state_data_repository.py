# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/repositories/state_data_repository.py

Repositorio para la tabla checkout_state_data.

Responsabilidades:
- Recuperar el state data combinado de un quote (fallback del checkout)
- Persistir / eliminar filas de state data por quote

Fecha: 2025-12-02
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.shared.database.repository import BaseRepository
from app.modules.payments.models.state_data_models import CheckoutStateData

logger = logging.getLogger(__name__)


class StateDataRepository(BaseRepository[CheckoutStateData]):
    def __init__(self) -> None:
        super().__init__(CheckoutStateData)

    def list_by_quote_id(self, session: Session, quote_id: int) -> Sequence[CheckoutStateData]:
        """Filas del quote en orden de inserción."""
        stmt = (
            select(CheckoutStateData)
            .where(CheckoutStateData.quote_id == quote_id)
            .order_by(CheckoutStateData.entity_id.asc())
        )
        return session.execute(stmt).scalars().all()

    def get_state_data_with_quote_id(self, session: Session, quote_id: Optional[int]) -> Dict[str, Any]:
        """
        Devuelve el state data combinado de todas las filas del quote.

        La combinación es superficial: ante claves repetidas gana la fila
        más reciente. Filas con JSON inválido o que no son objeto se omiten.

        Args:
            session: Sesión de base de datos
            quote_id: ID del quote (None → {})

        Returns:
            Dict con el state data combinado (vacío si no hay filas)
        """
        if quote_id is None:
            return {}

        merged: Dict[str, Any] = {}
        for row in self.list_by_quote_id(session, quote_id):
            try:
                decoded = json.loads(row.state_data)
            except (TypeError, ValueError):
                logger.warning(f"[state_data] Fila {row.entity_id} del quote {quote_id} no es JSON válido; se omite")
                continue
            if isinstance(decoded, dict):
                merged.update(decoded)

        return merged

    def add_for_quote(self, session: Session, quote_id: int, state_data: Dict[str, Any]) -> CheckoutStateData:
        return self.create(session, quote_id=quote_id, state_data=json.dumps(state_data))

    def delete_by_quote_id(self, session: Session, quote_id: int) -> int:
        """Elimina todas las filas del quote. Devuelve cuántas se borraron."""
        rows = self.list_by_quote_id(session, quote_id)
        for row in rows:
            session.delete(row)
        session.flush()
        return len(rows)


__all__ = ["StateDataRepository"]

# Fin del archivo backend/app/modules/payments/repositories/state_data_repository.py
