# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/facades/__init__.py

Punto de entrada del paquete de fachadas del módulo Payments.

Cada facade se importa explícitamente desde su paquete:

    from app.modules.payments.facades.checkout import assign_payment_information
"""

__all__: list[str] = []
