# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/__init__.py

Módulo de pagos del checkout.

Este módulo gestiona:
- Asignación del método de pago y sus datos adicionales al pago
- Saneamiento del state data enviado por el frontend
- Política de vault (tokenización) de métodos alternativos

Estructura:
- enums: Tipos de token recurrente y result codes
- models: Modelos ORM (Payment, CheckoutStateData)
- validators: Filtros por whitelist
- observers: Observers de payment_method_assign_data
- services: StateDataService, VaultService
- facades: Funciones de alto nivel (API pública)

Fecha: 02/12/2025
"""

__all__: list[str] = []

# Fin del archivo backend/app/modules/payments/__init__.py
