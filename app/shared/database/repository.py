# -*- coding: utf-8 -*-
"""
backend/app/shared/database/repository.py

Repositorio base para operaciones síncronas con SQLAlchemy.

Fecha: 2025-11-20
"""

from typing import Any, Type, TypeVar, Generic, Sequence, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

T = TypeVar("T")  # modelo ORM


class BaseRepository(Generic[T]):
    """Repositorio base para CRUD común."""

    def __init__(self, model: Type[T]):
        self.model = model

    # -------------------------------------------------------------
    # CRUD básico
    # -------------------------------------------------------------
    def get(self, session: Session, obj_id: Any) -> Optional[T]:
        return session.get(self.model, obj_id)

    def list(self, session: Session) -> Sequence[T]:
        result = session.execute(select(self.model))
        return result.scalars().all()

    def create(self, session: Session, **kwargs) -> T:
        obj = self.model(**kwargs)
        session.add(obj)
        session.flush()
        return obj

    def delete(self, session: Session, obj: T) -> None:
        session.delete(obj)
        session.flush()

# Fin del archivo backend/app/shared/database/repository.py
