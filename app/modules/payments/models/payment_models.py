# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/models/payment_models.py

Modelo ORM para la tabla payments.

El registro se crea junto con el quote y se completa durante el checkout:
método de pago, tipo de tarjeta/marca y la bolsa additional_information
que consumen los comandos posteriores (autorización, tokenización).

Fecha: 2025-11-20 (ajustado 2025-12-02)
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy import BigInteger, DateTime, Integer, JSON, String, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.ext.mutable import MutableDict
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base
from app.modules.payments.constants import CC_TYPE_MAX_LENGTH

# BIGINT en Postgres; INTEGER en SQLite para conservar el autoincremento
_PK_TYPE = BigInteger().with_variant(Integer(), "sqlite")
_JSON_TYPE = JSON().with_variant(JSONB(), "postgresql")


class Payment(Base):
    """Pago en curso asociado a un quote."""

    __tablename__ = "payments"

    id: Mapped[int] = mapped_column(_PK_TYPE, primary_key=True, autoincrement=True)

    quote_id: Mapped[Optional[int]] = mapped_column(
        BigInteger,
        nullable=True,
        index=True,
        doc="ID del quote (carrito) al que pertenece el pago.",
    )

    method: Mapped[Optional[str]] = mapped_column(
        String(64),
        nullable=True,
        doc="Código del método de pago seleccionado (p. ej. 'hpp').",
    )

    cc_type: Mapped[Optional[str]] = mapped_column(
        String(CC_TYPE_MAX_LENGTH),
        nullable=True,
        doc="Marca / variante del método de pago (brand_code).",
    )

    # Se muta in-place; MutableDict notifica los cambios a la sesión
    additional_information: Mapped[Dict[str, Any]] = mapped_column(
        MutableDict.as_mutable(_JSON_TYPE),
        nullable=False,
        default=dict,
        doc="Datos adicionales saneados del método de pago.",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    # -----------------------------------------------------------
    # additional_information
    # -----------------------------------------------------------
    def _info(self) -> Dict[str, Any]:
        if self.additional_information is None:
            self.additional_information = {}
        return self.additional_information

    def set_additional_information(self, key: str, value: Any) -> None:
        self._info()[key] = value

    def get_additional_information(self, key: Optional[str] = None) -> Any:
        info = self._info()
        if key is None:
            return dict(info)
        return info.get(key)

    def has_additional_information(self, key: str) -> bool:
        return key in self._info()

    def unset_additional_information(self, key: str) -> None:
        self._info().pop(key, None)

    def set_cc_type(self, cc_type: Optional[str]) -> None:
        self.cc_type = cc_type

    def __repr__(self) -> str:
        return f"<Payment id={self.id} quote_id={self.quote_id} method={self.method!r} cc_type={self.cc_type!r}>"


__all__ = ["Payment"]

# Fin del archivo backend/app/modules/payments/models/payment_models.py
