# -*- coding: utf-8 -*-
"""
backend/tests/conftest.py

Config global de tests del backend de checkout.

- Fuerza PYTHON_ENV=test antes de importar la app (SQLite en memoria)
- Crea un esquema limpio por test sobre un engine SQLite propio
- Resetea los singletons de configuración entre tests
"""

import os

# Debe fijarse antes de cualquier import de app.*: el engine se construye al importar
os.environ.setdefault("PYTHON_ENV", "test")

import pytest
from sqlalchemy.orm import Session, sessionmaker

from app.shared.config import config_loader
from app.shared.config.settings_payments import PaymentsSettings, reset_payments_settings
from app.shared.database.base import Base
from app.shared.database.database import build_engine

# Registra las tablas en Base.metadata
import app.modules.payments.models  # noqa: F401,E402
from app.modules.payments.models import Payment


@pytest.fixture(autouse=True)
def _reset_settings_singletons():
    """Cada test parte de una configuración recién leída del entorno."""
    config_loader.get_settings.cache_clear()
    reset_payments_settings()
    yield
    config_loader.get_settings.cache_clear()
    reset_payments_settings()


@pytest.fixture
def db_engine():
    engine = build_engine("sqlite+pysqlite:///:memory:")
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(db_engine):
    """Sesión síncrona sobre el esquema del test."""
    TestSession = sessionmaker(
        bind=db_engine,
        class_=Session,
        expire_on_commit=False,
        autoflush=False,
    )
    session = TestSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def payments_settings():
    """Defaults de pagos sin leer .env (vault deshabilitado)."""
    return PaymentsSettings(_env_file=None)


@pytest.fixture
def vault_settings():
    """Vault de métodos alternativos habilitado con token CardOnFile."""
    return PaymentsSettings(
        _env_file=None,
        store_alternative_payment_method_enabled=True,
    )


@pytest.fixture
def payment(db):
    """Pago persistido del quote 42, sin método asignado."""
    obj = Payment(quote_id=42)
    db.add(obj)
    db.flush()
    return obj

# Fin del archivo backend/tests/conftest.py
