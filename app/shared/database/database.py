# -*- coding: utf-8 -*-
"""
backend/app/shared/database/database.py

SQLAlchemy síncrono (psycopg) para el backend de checkout.

El flujo de asignación de datos de pago es síncrono y acotado a la
petición, por lo que la capa de datos usa Session clásica.

Provee:
- engine (create_engine)
- SessionLocal (sessionmaker)
- Base (DeclarativeBase con naming convention)
- Dependencia FastAPI: get_db
- context manager: session_scope()
- check_database_health()
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.shared.config import get_settings
from app.shared.database.base import Base  # reutilizamos la Base única

logger = logging.getLogger(__name__)


def build_engine(url: str, *, echo: bool = False) -> Engine:
    """
    Construye el engine según el dialecto.

    - SQLite en memoria: StaticPool + check_same_thread=False, para que
      todas las sesiones (y el TestClient) compartan la misma conexión.
    - Postgres: pool clásico con pre_ping y reciclado configurables.
    """
    if url.startswith("sqlite"):
        kwargs: Dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in url:
            kwargs["poolclass"] = StaticPool
        return create_engine(url, echo=echo, **kwargs)

    settings = get_settings()
    return create_engine(
        url,
        echo=echo,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_recycle=settings.db_pool_recycle,
        pool_pre_ping=settings.db_pool_pre_ping,
    )


_settings = get_settings()

logger.debug(f"[DB] Engine → {_settings.db_host}:{_settings.db_port}/{_settings.db_name} (echo={_settings.db_echo_sql})")

engine = build_engine(_settings.database_url, echo=_settings.db_echo_sql)

# ── Session factory
SessionLocal = sessionmaker(
    bind=engine,
    class_=Session,
    expire_on_commit=False,
    autoflush=False,
)


# ── Dependencia FastAPI
def get_db() -> Iterator[Session]:
    """
    Entrega una sesión por petición. Hace commit si el handler termina
    sin errores y rollback en caso contrario.
    """
    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        # Importante: rollback para liberar cualquier transacción/lock
        session.rollback()
        raise
    finally:
        session.close()


# ── Context manager reutilizable en scripts/tests
@contextmanager
def session_scope() -> Iterator[Session]:
    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


# ── Health check
def check_database_health(sql: str = "SELECT 1") -> bool:
    """
    Verifica conectividad a la base de datos.

    Returns:
        True si la conexión es exitosa, False en caso contrario
    """
    try:
        with engine.connect() as conn:
            conn.execute(text(sql))
        return True
    except SQLAlchemyError as e:
        logger.warning(f"[DB] Health check falló: {e}")
        return False


__all__ = [
    "engine",
    "SessionLocal",
    "Base",
    "build_engine",
    "get_db",
    "session_scope",
    "check_database_health",
]
# Fin del archivo backend/app/shared/database/database.py
