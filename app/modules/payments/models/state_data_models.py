# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/models/state_data_models.py

Modelo ORM para la tabla checkout_state_data.

Cada fila guarda el state data (JSON serializado) que el frontend envió
para un quote. Puede haber varias filas por quote; se combinan en orden
de inserción al recuperarlas.

Fecha: 2025-12-02
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base

_PK_TYPE = BigInteger().with_variant(Integer(), "sqlite")


class CheckoutStateData(Base):
    """State data almacenado por quote."""

    __tablename__ = "checkout_state_data"

    entity_id: Mapped[int] = mapped_column(_PK_TYPE, primary_key=True, autoincrement=True)

    quote_id: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        index=True,
        doc="ID del quote dueño del state data.",
    )

    state_data: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        doc="State data serializado como JSON.",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )


__all__ = ["CheckoutStateData"]

# Fin del archivo backend/app/modules/payments/models/state_data_models.py
