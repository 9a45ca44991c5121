# -*- coding: utf-8 -*-
"""
backend/app/shared/events/__init__.py

Despacho síncrono de eventos de dominio (observer pattern).

Fecha: 2025-12-02
"""

from .data_object import DataObject
from .event_manager import Event, EventManager, Observer

__all__ = [
    "DataObject",
    "Event",
    "EventManager",
    "Observer",
]

# Fin del archivo backend/app/shared/events/__init__.py
