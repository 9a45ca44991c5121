# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/schemas/payment_information_schemas.py

Esquemas Pydantic para asignar el método de pago de un checkout.

additional_data se acepta sin tipar: el observer del método decide qué
conservar y descarta silenciosamente lo que no sea un objeto.

Fecha: 2025-12-02
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PaymentInformationRequest(BaseModel):
    """Payload del método de pago elegido en el checkout."""

    method: str = Field(
        min_length=1,
        max_length=64,
        description="Código del método de pago (p. ej. 'hpp').",
    )
    additional_data: Optional[Any] = Field(
        default=None,
        description=(
            "Datos adicionales del método: brand_code, df_value, guestEmail, "
            "stateData (JSON). Otras claves se descartan."
        ),
    )

    @field_validator("method")
    @classmethod
    def normalize_method(cls, value: str) -> str:
        value = value.strip().lower()
        if not value:
            raise ValueError("method must not be blank")
        return value


class PaymentInformationResponse(BaseModel):
    """
    Estado del pago tras asignar el método.

    No se devuelven los valores de additional_information (pueden contener
    IBAN / titular); solo sus claves.
    """

    model_config = ConfigDict(from_attributes=True)

    payment_id: int
    method: Optional[str] = None
    cc_type: Optional[str] = None
    vault_active: bool = False
    additional_information_keys: List[str] = Field(default_factory=list)


__all__ = [
    "PaymentInformationRequest",
    "PaymentInformationResponse",
]

# Fin del archivo backend/app/modules/payments/schemas/payment_information_schemas.py
