# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/models/payment_info.py

Contrato mínimo de un registro de pago mutable durante el checkout.

Lo implementa el modelo ORM Payment; los observers dependen solo de
este Protocol para poder operar también sobre objetos en memoria.

Fecha: 2025-12-02
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class PaymentInfo(Protocol):
    quote_id: Optional[int]

    def set_additional_information(self, key: str, value: Any) -> None: ...

    def get_additional_information(self, key: Optional[str] = None) -> Any: ...

    def set_cc_type(self, cc_type: Optional[str]) -> None: ...


__all__ = ["PaymentInfo"]

# Fin del archivo backend/app/modules/payments/models/payment_info.py
