# -*- coding: utf-8 -*-
"""
backend/app/shared/config/settings_payments.py

Configuración del módulo de pagos.

Descripción:
    Centraliza los flags de métodos de pago alternativos (vault / recurrencia),
    el código de marca SEPA y el código del método de pago alojado (HPP).

Fecha: 25/10/2025
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Tipos de token soportados para métodos de pago alternativos
TokenType = Literal["CardOnFile", "Subscription", "UnscheduledCardOnFile"]


class PaymentsSettings(BaseSettings):
    """Configuración del sistema de pagos."""

    # =========================================================================
    # FEATURE FLAGS
    # =========================================================================

    payments_enabled: bool = Field(
        default=True,
        description="Habilita el sistema de pagos globalmente"
    )

    # =========================================================================
    # MÉTODO DE PAGO ALOJADO (HPP)
    # =========================================================================

    hpp_method_code: str = Field(
        default="hpp",
        description="Código del método de pago alojado (sufijo del evento assign_data)"
    )

    sepa_brand_code: str = Field(
        default="sepadirectdebit",
        description="brand_code que identifica SEPA Direct Debit"
    )

    # =========================================================================
    # VAULT / RECURRENCIA
    # =========================================================================

    store_alternative_payment_method_enabled: bool = Field(
        default=False,
        description="Permite tokenizar métodos de pago alternativos (no tarjeta)"
    )

    alternative_payment_method_token_type: TokenType = Field(
        default="CardOnFile",
        description="Tipo de token para métodos alternativos: CardOnFile | Subscription | UnscheduledCardOnFile"
    )

    @field_validator("sepa_brand_code", "hpp_method_code", mode="before")
    @classmethod
    def _normalize_codes(cls, v: Optional[str]) -> Optional[str]:
        """Los códigos se comparan en minúsculas y sin espacios."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    # =========================================================================
    # CONFIGURACIÓN DE PYDANTIC
    # =========================================================================

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# Singleton global
_payments_settings: Optional[PaymentsSettings] = None


def get_payments_settings() -> PaymentsSettings:
    """
    Obtiene la instancia global de configuración de pagos.

    Returns:
        PaymentsSettings: Configuración de pagos
    """
    global _payments_settings
    if _payments_settings is None:
        _payments_settings = PaymentsSettings()
    return _payments_settings


def reset_payments_settings() -> None:
    """Descarta el singleton (útil en tests tras cambiar variables de entorno)."""
    global _payments_settings
    _payments_settings = None


__all__ = [
    "PaymentsSettings",
    "TokenType",
    "get_payments_settings",
    "reset_payments_settings",
]
# Fin del archivo backend/app/shared/config/settings_payments.py
