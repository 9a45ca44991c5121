# -*- coding: utf-8 -*-
"""
backend/app/shared/events/event_manager.py

Registro y despacho síncrono de observers por nombre de evento.

Responsabilidades:
1. Registrar observers por nombre de evento
2. Construir el Event con los argumentos del despacho
3. Ejecutar los observers en orden de registro

Las excepciones de un observer se propagan al llamador.

Fecha: 2025-12-02
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Dict, List, Optional, Protocol

from .data_object import DataObject

logger = logging.getLogger(__name__)


class Event:
    """Evento con nombre y argumentos de despacho."""

    def __init__(self, name: str, data: Optional[Dict[str, Any]] = None) -> None:
        self.name = name
        self._payload = DataObject(data)

    def get_data_by_key(self, key: str) -> Any:
        return self._payload.get_data(key)

    def get_data(self) -> Dict[str, Any]:
        return self._payload.get_data()

    def __repr__(self) -> str:
        return f"Event(name={self.name!r}, keys={sorted(self.get_data())})"


class Observer(Protocol):
    def execute(self, event: Event) -> None: ...


class EventManager:
    """Despachador síncrono de eventos."""

    def __init__(self) -> None:
        self._observers: Dict[str, List[Observer]] = defaultdict(list)

    def register(self, event_name: str, observer: Observer) -> None:
        self._observers[event_name].append(observer)
        logger.debug(f"[events] {type(observer).__name__} registrado en '{event_name}'")

    def observers_for(self, event_name: str) -> List[Observer]:
        return list(self._observers.get(event_name, ()))

    def dispatch(self, event_name: str, **data: Any) -> Event:
        """
        Despacha `event_name` a sus observers.

        Args:
            event_name: Nombre del evento
            **data: Argumentos disponibles vía event.get_data_by_key()

        Returns:
            El Event construido (útil en tests)
        """
        event = Event(event_name, data)
        observers = self.observers_for(event_name)

        logger.debug(f"[events] Despachando '{event_name}' a {len(observers)} observer(s)")

        for observer in observers:
            observer.execute(event)

        return event


__all__ = ["Event", "EventManager", "Observer"]

# Fin del archivo backend/app/shared/events/event_manager.py
