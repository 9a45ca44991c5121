# -*- coding: utf-8 -*-
"""
backend/tests/modules/payments/facades/test_payment_information_facade.py

Tests del facade de asignación de información de pago.

Fecha: 02/12/2025
"""

import json

import pytest

from app.shared.events import EventManager
from app.modules.payments.constants import IS_ACTIVE_CODE
from app.modules.payments.facades.checkout import (
    PaymentNotFound,
    assign_payment_information,
    to_payment_information_response,
)
from app.modules.payments.schemas import PaymentInformationRequest


class _RecordingObserver:
    def __init__(self):
        self.events = []

    def execute(self, event):
        self.events.append((event.name, event.get_data_by_key("method")))


class TestAssignPaymentInformation:

    def test_assigns_method_and_sanitized_data(self, db, payment, payments_settings):
        """Test: método asignado y datos saneados en el pago."""
        request = PaymentInformationRequest(
            method="HPP",
            additional_data={
                "brand_code": "sepadirectdebit",
                "stateData": json.dumps({"paymentMethod": {"iban": "NL00", "ownerName": "Jan"}}),
                "injected": "nope",
            },
        )

        result = assign_payment_information(
            db, payment_id=payment.id, request=request, settings=payments_settings
        )

        assert result is payment
        assert payment.method == "hpp"
        assert payment.cc_type == "sepadirectdebit"
        assert payment.get_additional_information() == {
            "brand_code": "sepadirectdebit",
            "iban": "NL00",
            "ownerName": "Jan",
        }

    def test_vault_flag_with_enabled_settings(self, db, payment, vault_settings):
        request = PaymentInformationRequest(method="hpp", additional_data={"brand_code": "paypal"})

        assign_payment_information(db, payment_id=payment.id, request=request, settings=vault_settings)

        assert payment.get_additional_information(IS_ACTIVE_CODE) is True

    def test_other_methods_are_not_sanitized_by_hpp(self, db, payment, payments_settings):
        """Test: un método sin observer registrado no modifica additional_information."""
        request = PaymentInformationRequest(method="checkmo", additional_data={"brand_code": "paypal"})

        assign_payment_information(db, payment_id=payment.id, request=request, settings=payments_settings)

        assert payment.method == "checkmo"
        assert payment.cc_type is None
        assert payment.get_additional_information() == {}

    def test_dispatches_generic_and_method_events(self, db, payment):
        """Test: se despacha el evento genérico y luego el del método."""
        recorder = _RecordingObserver()
        manager = EventManager()
        manager.register("payment_method_assign_data", recorder)
        manager.register("payment_method_assign_data_hpp", recorder)

        assign_payment_information(
            db,
            payment_id=payment.id,
            request=PaymentInformationRequest(method="hpp"),
            event_manager=manager,
        )

        assert recorder.events == [
            ("payment_method_assign_data", "hpp"),
            ("payment_method_assign_data_hpp", "hpp"),
        ]

    def test_unknown_payment_raises(self, db):
        with pytest.raises(PaymentNotFound):
            assign_payment_information(
                db, payment_id=999, request=PaymentInformationRequest(method="hpp")
            )


class TestPaymentInformationResponse:

    def test_exposes_keys_not_values(self, payment):
        """Test: la respuesta no expone valores sensibles."""
        payment.method = "hpp"
        payment.set_cc_type("sepadirectdebit")
        payment.set_additional_information("iban", "NL00")
        payment.set_additional_information(IS_ACTIVE_CODE, True)

        response = to_payment_information_response(payment)

        assert response.payment_id == payment.id
        assert response.vault_active is True
        assert response.additional_information_keys == sorted(["iban", IS_ACTIVE_CODE])
        assert "NL00" not in response.model_dump_json()

# Fin del archivo backend/tests/modules/payments/facades/test_payment_information_facade.py
