# -*- coding: utf-8 -*-
"""
backend/app/shared/database/__init__.py

Re-exporta utilidades comunes de base de datos.

Fecha: 2025-10-18 (Consolidación modular; ajustado 2025-11-21)
"""

from __future__ import annotations

from .database import (
    engine,
    SessionLocal,
    build_engine,
    get_db,
    session_scope,
    check_database_health,
)
from .base import Base, NAMING_CONVENTION
from .repository import BaseRepository

__all__ = [
    "engine",
    "SessionLocal",
    "Base",
    "NAMING_CONVENTION",
    "BaseRepository",
    "build_engine",
    "get_db",
    "session_scope",
    "check_database_health",
]

# Fin del archivo backend/app/shared/database/__init__.py
