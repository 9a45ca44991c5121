# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/facades/checkout/payment_information.py

Facade para asignar el método de pago (y sus datos adicionales) a un pago.

Pasos:
1. Cargar el pago
2. Fijar el código de método
3. Despachar payment_method_assign_data y payment_method_assign_data_<method>
4. flush para que los cambios queden en la transacción de la petición

Fecha: 2025-12-02
"""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.orm import Session

from app.shared.config.settings_payments import PaymentsSettings
from app.shared.events import DataObject, EventManager
from app.modules.payments.constants import ASSIGN_DATA_EVENT, IS_ACTIVE_CODE, KEY_ADDITIONAL_DATA
from app.modules.payments.models.payment_models import Payment
from app.modules.payments.observers import assign_data_event_name, build_event_manager
from app.modules.payments.repositories.payment_repository import PaymentRepository
from app.modules.payments.schemas import PaymentInformationRequest, PaymentInformationResponse

logger = logging.getLogger(__name__)


class PaymentNotFound(LookupError):
    pass


def assign_payment_information(
    session: Session,
    *,
    payment_id: int,
    request: PaymentInformationRequest,
    payment_repo: Optional[PaymentRepository] = None,
    event_manager: Optional[EventManager] = None,
    settings: Optional[PaymentsSettings] = None,
) -> Payment:
    """
    Asigna método y datos adicionales al pago `payment_id`.

    Raises:
        PaymentNotFound: Si el pago no existe
    """
    payment_repo = payment_repo or PaymentRepository()
    payment = payment_repo.get_by_id(session, payment_id)
    if payment is None:
        raise PaymentNotFound(f"Payment {payment_id} not found")

    event_manager = event_manager or build_event_manager(session, settings)

    payment.method = request.method
    data = DataObject(method=request.method)
    data.set_data(KEY_ADDITIONAL_DATA, request.additional_data)

    for event_name in (ASSIGN_DATA_EVENT, assign_data_event_name(request.method)):
        event_manager.dispatch(
            event_name,
            data=data,
            payment_model=payment,
            method=request.method,
        )

    session.flush()

    logger.info(
        f"[checkout] Pago {payment.id}: método '{payment.method}' asignado "
        f"(cc_type={payment.cc_type}, claves={len(payment.get_additional_information())})"
    )
    return payment


def to_payment_information_response(payment: Payment) -> PaymentInformationResponse:
    info = payment.get_additional_information()
    return PaymentInformationResponse(
        payment_id=payment.id,
        method=payment.method,
        cc_type=payment.cc_type,
        vault_active=bool(info.get(IS_ACTIVE_CODE, False)),
        additional_information_keys=sorted(info),
    )


__all__ = [
    "PaymentNotFound",
    "assign_payment_information",
    "to_payment_information_response",
]

# Fin del archivo backend/app/modules/payments/facades/checkout/payment_information.py
