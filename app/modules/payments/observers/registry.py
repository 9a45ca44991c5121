# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/observers/registry.py

Construcción del EventManager de pagos con sus observers.

Los observers dependen de la sesión de la petición (lectura de state data
almacenado), por lo que el EventManager se construye por petición.

Fecha: 2025-12-02
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from app.shared.config.settings_payments import PaymentsSettings, get_payments_settings
from app.shared.events import EventManager
from app.modules.payments.constants import ASSIGN_DATA_EVENT
from app.modules.payments.payment_methods import PaymentMethodFactory
from app.modules.payments.services.state_data_service import StateDataService
from app.modules.payments.services.vault_service import VaultService
from app.modules.payments.validators import CheckoutStateDataValidator
from .hpp_data_assign_observer import HppDataAssignObserver


def assign_data_event_name(method_code: str) -> str:
    """payment_method_assign_data_<method_code>"""
    return f"{ASSIGN_DATA_EVENT}_{method_code}"


def build_event_manager(
    session: Optional[Session] = None,
    settings: Optional[PaymentsSettings] = None,
    *,
    state_data_service: Optional[StateDataService] = None,
) -> EventManager:
    """
    Registra los observers de asignación de datos.

    Args:
        session: Sesión de la petición (None → sin fallback persistente)
        settings: Configuración de pagos (default: singleton)
        state_data_service: Servicio a reutilizar (default: uno nuevo por petición)

    Returns:
        EventManager listo para despachar
    """
    settings = settings or get_payments_settings()

    manager = EventManager()
    manager.register(
        assign_data_event_name(settings.hpp_method_code),
        HppDataAssignObserver(
            checkout_state_data_validator=CheckoutStateDataValidator(),
            state_data_service=state_data_service or StateDataService(session),
            payment_method_factory=PaymentMethodFactory(),
            vault_service=VaultService(settings),
            sepa_brand_code=settings.sepa_brand_code,
        ),
    )
    return manager


__all__ = ["build_event_manager", "assign_data_event_name"]

# Fin del archivo backend/app/modules/payments/observers/registry.py
