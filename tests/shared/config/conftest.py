# -*- coding: utf-8 -*-
"""
backend/tests/shared/config/conftest.py

Aísla los tests de configuración de variables heredadas del entorno.
"""

import pytest

_APP_ENV_VARS = (
    "DB_URL",
    "DB_SSLMODE",
    "DB_HOST",
    "DEBUG",
    "CORS_ORIGINS",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "HPP_METHOD_CODE",
    "SEPA_BRAND_CODE",
    "STORE_ALTERNATIVE_PAYMENT_METHOD_ENABLED",
    "ALTERNATIVE_PAYMENT_METHOD_TOKEN_TYPE",
)


@pytest.fixture(autouse=True)
def _clean_app_env(monkeypatch):
    for name in _APP_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield

# Fin del archivo backend/tests/shared/config/conftest.py
