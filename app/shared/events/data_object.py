# -*- coding: utf-8 -*-
"""
backend/app/shared/events/data_object.py

Contenedor genérico clave/valor que viaja en los eventos.

Fecha: 2025-12-02
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class DataObject:
    """
    Bolsa de datos con acceso por clave.

    Se usa para transportar el payload de la petición (p. ej. method y
    additional_data) hacia los observers sin acoplarlos a Pydantic.
    """

    def __init__(self, data: Optional[Dict[str, Any]] = None, **kwargs: Any) -> None:
        self._data: Dict[str, Any] = dict(data or {})
        self._data.update(kwargs)

    def get_data(self, key: Optional[str] = None, default: Any = None) -> Any:
        """Devuelve el valor de `key`, o una copia del dict completo si key es None."""
        if key is None:
            return dict(self._data)
        return self._data.get(key, default)

    def set_data(self, key: str, value: Any) -> "DataObject":
        self._data[key] = value
        return self

    def has_data(self, key: str) -> bool:
        return key in self._data

    def unset_data(self, key: str) -> "DataObject":
        self._data.pop(key, None)
        return self

    def __repr__(self) -> str:
        return f"DataObject(keys={sorted(self._data)})"


__all__ = ["DataObject"]

# Fin del archivo backend/app/shared/events/data_object.py
