# -*- coding: utf-8 -*-
"""
backend/app/core/db.py

Fachada para la capa de acceso a datos basada en SQLAlchemy.
Envuelve el módulo `app.shared.database.database` para exponer un
conjunto claro de primitivas de acceso a la base de datos:

- engine
- SessionLocal
- Base
- get_db
- session_scope()
- check_database_health()

Fecha: 2025-11-17
"""

from app.shared.database.database import (
    engine,
    SessionLocal,
    Base,
    get_db,
    session_scope,
    check_database_health,
)


__all__ = [
    "engine",
    "SessionLocal",
    "Base",
    "get_db",
    "session_scope",
    "check_database_health",
]

# Fin del archivo backend/app/core/db.py
