# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/observers/__init__.py

Observers de eventos del módulo Payments.
"""

from .abstract_data_assign_observer import AbstractDataAssignObserver, ObserverArgumentError
from .hpp_data_assign_observer import HppDataAssignObserver
from .registry import build_event_manager, assign_data_event_name

__all__ = [
    "AbstractDataAssignObserver",
    "ObserverArgumentError",
    "HppDataAssignObserver",
    "build_event_manager",
    "assign_data_event_name",
]
