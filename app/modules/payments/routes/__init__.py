# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/routes/__init__.py

Ensamblador de rutas REST del módulo Payments.

Incluye:
- /payments/{payment_id}/payment-information

Fecha: 2025-12-02
"""

from fastapi import APIRouter

from .payment_information import router as payment_information_router

router = APIRouter()

# Prefijo común /payments para todas las rutas del módulo
router.include_router(payment_information_router, prefix="/payments")

__all__ = ["router"]
