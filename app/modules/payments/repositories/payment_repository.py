# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/repositories/payment_repository.py

Repositorio para la tabla payments.

Responsabilidades:
- Búsqueda por ID y por quote

Fecha: 2025-11-20 (ajustado 2025-12-02)
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.shared.database.repository import BaseRepository
from app.modules.payments.models.payment_models import Payment


class PaymentRepository(BaseRepository[Payment]):
    def __init__(self) -> None:
        super().__init__(Payment)

    def get_by_id(self, session: Session, payment_id: int) -> Optional[Payment]:
        return self.get(session, payment_id)

    def get_by_quote_id(self, session: Session, quote_id: int) -> Optional[Payment]:
        """Obtiene el pago más reciente del quote."""
        stmt = (
            select(Payment)
            .where(Payment.quote_id == quote_id)
            .order_by(Payment.id.desc())
        )
        return session.execute(stmt).scalars().first()


__all__ = ["PaymentRepository"]

# Fin del archivo backend/app/modules/payments/repositories/payment_repository.py
