# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/constants.py

Constantes del flujo de asignación de datos de pago (checkout).
"""

# Clave del payload de método de pago que contiene la bolsa de datos adicionales
KEY_ADDITIONAL_DATA = "additional_data"

# Claves raíz aprobadas dentro de additional_data
BRAND_CODE = "brand_code"
DF_VALUE = "df_value"
GUEST_EMAIL = "guestEmail"
STATE_DATA = "stateData"

APPROVED_ADDITIONAL_DATA_KEYS = (
    BRAND_CODE,
    DF_VALUE,
    GUEST_EMAIL,
    STATE_DATA,
)

# brand_code de SEPA Direct Debit y campos que se conservan para tokenizar
SEPA = "sepadirectdebit"
SEPA_IBAN = "iban"
SEPA_OWNER_NAME = "ownerName"

# Sub-objeto de state data con los datos del método de pago
STATE_DATA_PAYMENT_METHOD = "paymentMethod"

# Longitud máxima de cc_type (columna payments.cc_type)
CC_TYPE_MAX_LENGTH = 64

# Flag de additional_information que activa el vault (tokenización)
IS_ACTIVE_CODE = "is_active_payment_token_enabler"

# Eventos de asignación de datos (genérico y por método: <prefijo>_<method>)
ASSIGN_DATA_EVENT = "payment_method_assign_data"

__all__ = [
    "KEY_ADDITIONAL_DATA",
    "BRAND_CODE", "DF_VALUE", "GUEST_EMAIL", "STATE_DATA",
    "APPROVED_ADDITIONAL_DATA_KEYS",
    "SEPA", "SEPA_IBAN", "SEPA_OWNER_NAME",
    "STATE_DATA_PAYMENT_METHOD",
    "CC_TYPE_MAX_LENGTH",
    "IS_ACTIVE_CODE",
    "ASSIGN_DATA_EVENT",
]
