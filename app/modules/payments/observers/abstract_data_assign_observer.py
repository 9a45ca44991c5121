# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/observers/abstract_data_assign_observer.py

Base de los observers del evento payment_method_assign_data.

El despachador entrega en el Event:
- data: DataObject con el payload del método de pago (method, additional_data)
- payment_model: registro de pago mutable (PaymentInfo)
- method: código del método de pago

Un argumento ausente o de tipo incorrecto es un error de programación del
despacho, no un problema del payload del cliente: se eleva
ObserverArgumentError.

Fecha: 2025-12-02
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from app.shared.events import DataObject, Event
from app.modules.payments.models.payment_info import PaymentInfo


class ObserverArgumentError(ValueError):
    """El evento no trae los argumentos que el observer necesita."""


class AbstractDataAssignObserver(ABC):
    DATA_CODE = "data"
    MODEL_CODE = "payment_model"
    METHOD_CODE = "method"

    @abstractmethod
    def execute(self, event: Event) -> None:
        """Procesa el evento de asignación de datos."""

    def read_data_argument(self, event: Event) -> DataObject:
        value = event.get_data_by_key(self.DATA_CODE)
        if not isinstance(value, DataObject):
            raise ObserverArgumentError(f"'{self.DATA_CODE}' debe ser DataObject en el evento {event.name}")
        return value

    def read_payment_model_argument(self, event: Event) -> PaymentInfo:
        value = event.get_data_by_key(self.MODEL_CODE)
        if not isinstance(value, PaymentInfo):
            raise ObserverArgumentError(f"'{self.MODEL_CODE}' debe implementar PaymentInfo en el evento {event.name}")
        return value

    def read_method_argument(self, event: Event) -> str:
        value = event.get_data_by_key(self.METHOD_CODE)
        if not isinstance(value, str) or not value:
            raise ObserverArgumentError(f"'{self.METHOD_CODE}' debe ser un código no vacío en el evento {event.name}")
        return value


__all__ = ["AbstractDataAssignObserver", "ObserverArgumentError"]

# Fin del archivo backend/app/modules/payments/observers/abstract_data_assign_observer.py
