# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/validators/data_array_validator.py

Filtro por WHITELIST de claves raíz de un diccionario.

Solo sobreviven las claves explícitamente aprobadas; todo lo demás se
descarta sin error. No se inspeccionan valores anidados.

Fecha: 2025-12-02
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping


class DataArrayValidator:
    """Filtrado de claves aprobadas."""

    @staticmethod
    def get_array_only_with_approved_keys(
        data: Mapping[str, Any],
        approved_keys: Iterable[str],
    ) -> Dict[str, Any]:
        """
        Devuelve un dict nuevo con solo las claves aprobadas de `data`.

        Conserva el orden de `data`. Si `data` no es un Mapping devuelve {}.
        """
        if not isinstance(data, Mapping):
            return {}

        approved = set(approved_keys)
        return {key: value for key, value in data.items() if key in approved}


__all__ = ["DataArrayValidator"]

# Fin del archivo backend/app/modules/payments/validators/data_array_validator.py
