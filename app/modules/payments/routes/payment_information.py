# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/routes/payment_information.py

Rutas de asignación del método de pago en el checkout.

Endpoints:
- POST /payments/{payment_id}/payment-information
- GET  /payments/{payment_id}/payment-information

Fecha: 2025-12-02
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.shared.database.database import get_db
from app.modules.payments.repositories import PaymentRepository
from app.modules.payments.facades.checkout import (
    PaymentNotFound,
    assign_payment_information,
    to_payment_information_response,
)
from app.modules.payments.schemas import PaymentInformationRequest, PaymentInformationResponse

router = APIRouter(
    prefix="",
    tags=["payments"],
)


@router.post(
    "/{payment_id}/payment-information",
    response_model=PaymentInformationResponse,
    summary="Asigna método de pago y datos adicionales",
)
def assign_payment_information_route(
    payment_id: int,
    payload: PaymentInformationRequest,
    session: Session = Depends(get_db),
) -> PaymentInformationResponse:
    """
    Asigna el método de pago al pago indicado.

    Los datos adicionales no aprobados o malformados se descartan sin error.
    """
    try:
        payment = assign_payment_information(
            session,
            payment_id=payment_id,
            request=payload,
            payment_repo=PaymentRepository(),
        )
    except PaymentNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return to_payment_information_response(payment)


@router.get(
    "/{payment_id}/payment-information",
    response_model=PaymentInformationResponse,
    summary="Consulta el método de pago asignado",
)
def get_payment_information_route(
    payment_id: int,
    session: Session = Depends(get_db),
) -> PaymentInformationResponse:
    payment = PaymentRepository().get_by_id(session, payment_id)
    if payment is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Payment {payment_id} not found")
    return to_payment_information_response(payment)


__all__ = ["router"]

# Fin del archivo backend/app/modules/payments/routes/payment_information.py
