# -*- coding: utf-8 -*-
"""
backend/tests/modules/payments/observers/test_hpp_data_assign_observer.py

Tests del observer de asignación de datos del método alojado (HPP).

Fecha: 02/12/2025
"""

import json
import logging

import pytest

from app.shared.config.settings_payments import PaymentsSettings
from app.shared.events import DataObject, Event
from app.modules.payments.constants import IS_ACTIVE_CODE
from app.modules.payments.models import Payment
from app.modules.payments.observers import HppDataAssignObserver
from app.modules.payments.payment_methods import PaymentMethodFactory
from app.modules.payments.repositories import StateDataRepository
from app.modules.payments.services import StateDataService, VaultService
from app.modules.payments.validators import CheckoutStateDataValidator


SEPA_STATE_DATA = {
    "paymentMethod": {
        "type": "sepadirectdebit",
        "iban": "NL13TEST0123456789",
        "ownerName": "A. Schneider",
    },
    "browserInfo": {"userAgent": "pytest"},
}


def build_observer(settings=None, session=None, state_data_service=None):
    settings = settings or PaymentsSettings(_env_file=None)
    return HppDataAssignObserver(
        checkout_state_data_validator=CheckoutStateDataValidator(),
        state_data_service=state_data_service or StateDataService(session),
        payment_method_factory=PaymentMethodFactory(),
        vault_service=VaultService(settings),
        sepa_brand_code=settings.sepa_brand_code,
    )


def build_event(payment, additional_data, method="hpp"):
    data = DataObject(method=method)
    data.set_data("additional_data", additional_data)
    return Event(
        f"payment_method_assign_data_{method}",
        {"data": data, "payment_model": payment, "method": method},
    )


class _InMemoryPaymentInfo:
    """Pago fuera del ORM que cumple el contrato PaymentInfo."""

    def __init__(self, quote_id=None):
        self.quote_id = quote_id
        self.cc_type = None
        self.info = {}

    def set_additional_information(self, key, value):
        self.info[key] = value

    def get_additional_information(self, key=None):
        return dict(self.info) if key is None else self.info.get(key)

    def set_cc_type(self, cc_type):
        self.cc_type = cc_type


def test_observer_accepts_any_payment_info():
    """Test: el observer opera sobre cualquier objeto PaymentInfo."""
    payment = _InMemoryPaymentInfo(quote_id=9)

    build_observer().execute(build_event(payment, {"brand_code": "twint", "guestEmail": "g@example.com"}))

    assert payment.info == {"brand_code": "twint", "guestEmail": "g@example.com"}
    assert payment.cc_type == "twint"


class TestAdditionalDataShape:
    """additional_data ausente o que no es un objeto."""

    @pytest.mark.parametrize("additional_data", [None, "brand_code=ideal", 7, ["brand_code"]])
    def test_non_mapping_leaves_payment_untouched(self, additional_data):
        """Test: sin objeto additional_data no se modifica el pago."""
        payment = Payment(quote_id=1)
        payment.set_additional_information("existing", "value")

        build_observer().execute(build_event(payment, additional_data))

        assert payment.get_additional_information() == {"existing": "value"}
        assert payment.cc_type is None

    def test_empty_mapping_writes_nothing(self):
        """Test: objeto vacío no escribe claves ni cc_type."""
        payment = Payment(quote_id=1)

        build_observer().execute(build_event(payment, {}))

        assert payment.get_additional_information() == {}
        assert payment.cc_type is None


class TestApprovedKeys:
    """Filtrado por whitelist de claves raíz."""

    def test_only_approved_keys_are_written(self):
        """Test: claves no aprobadas se descartan sin error."""
        payment = Payment(quote_id=1)
        additional_data = {
            "brand_code": "ideal",
            "df_value": "fp-123",
            "guestEmail": "guest@example.com",
            "returnUrl": "https://evil.example.com",
            "amount": 1,
        }

        build_observer().execute(build_event(payment, additional_data))

        assert payment.get_additional_information() == {
            "brand_code": "ideal",
            "df_value": "fp-123",
            "guestEmail": "guest@example.com",
        }

    def test_existing_information_is_preserved(self):
        """Test: claves previas del pago no se borran."""
        payment = Payment(quote_id=1)
        payment.set_additional_information("cc_owner", "J. Doe")

        build_observer().execute(build_event(payment, {"df_value": "fp"}))

        assert payment.get_additional_information("cc_owner") == "J. Doe"
        assert payment.get_additional_information("df_value") == "fp"

    def test_request_payload_is_not_mutated(self):
        """Test: el dict recibido no se modifica al quitar stateData."""
        payment = Payment(quote_id=1)
        additional_data = {"stateData": json.dumps({"riskData": {}}), "foo": "bar"}
        snapshot = dict(additional_data)

        build_observer().execute(build_event(payment, additional_data))

        assert additional_data == snapshot


class TestStateData:
    """Resolución y validación del state data."""

    def test_state_data_is_never_written_to_payment(self):
        """Test: stateData no llega a additional_information."""
        payment = Payment(quote_id=7)

        build_observer().execute(
            build_event(payment, {"stateData": json.dumps(SEPA_STATE_DATA), "df_value": "x"})
        )

        assert "stateData" not in payment.get_additional_information()
        assert payment.get_additional_information() == {"df_value": "x"}

    def test_validated_state_data_is_kept_in_service(self):
        """Test: el state data validado queda disponible para la petición."""
        service = StateDataService()
        payment = Payment(quote_id=7)
        state_data = {**SEPA_STATE_DATA, "merchantAccount": "Hijacked", "amount": {"value": 1}}

        build_observer(state_data_service=service).execute(
            build_event(payment, {"stateData": json.dumps(state_data)})
        )

        stored = service.get_state_data(7)
        assert set(stored) == {"paymentMethod", "browserInfo"}
        assert service.get_payment_method_variant(7) == "sepadirectdebit"

    def test_inline_state_data_as_object(self):
        """Test: stateData ya decodificado también se acepta."""
        service = StateDataService()
        payment = Payment(quote_id=7)

        build_observer(state_data_service=service).execute(
            build_event(payment, {"stateData": {"riskData": {"score": 0}}})
        )

        assert service.get_state_data(7) == {"riskData": {"score": 0}}

    @pytest.mark.parametrize("raw", ["{not json", "[1, 2]", "\"text\"", 12])
    def test_invalid_state_data_is_ignored(self, raw):
        """Test: stateData malformado se ignora sin error."""
        service = StateDataService()
        payment = Payment(quote_id=7)

        build_observer(state_data_service=service).execute(
            build_event(payment, {"stateData": raw, "brand_code": "ideal"})
        )

        assert service.get_state_data(7) == {}
        assert payment.get_additional_information() == {"brand_code": "ideal"}
        assert payment.cc_type == "ideal"

    def test_missing_quote_id_does_not_fail(self):
        """Test: un pago sin quote no almacena state data."""
        service = StateDataService()
        payment = Payment(quote_id=None)

        build_observer(state_data_service=service).execute(
            build_event(payment, {"stateData": json.dumps(SEPA_STATE_DATA)})
        )

        assert service.get_state_data(None) == {}
        assert payment.get_additional_information() == {}

    def test_fallback_to_stored_state_data(self, db, payment):
        """Test: sin stateData inline se usa el almacenado del quote."""
        StateDataRepository().add_for_quote(db, payment.quote_id, SEPA_STATE_DATA)
        service = StateDataService(db)

        build_observer(state_data_service=service).execute(
            build_event(payment, {"brand_code": "sepadirectdebit"})
        )

        assert service.get_payment_method_variant(payment.quote_id) == "sepadirectdebit"
        assert payment.get_additional_information("iban") == "NL13TEST0123456789"
        assert payment.get_additional_information("ownerName") == "A. Schneider"

    def test_inline_state_data_wins_over_stored(self, db, payment):
        """Test: el stateData inline tiene prioridad sobre el almacenado."""
        StateDataRepository().add_for_quote(db, payment.quote_id, SEPA_STATE_DATA)
        service = StateDataService(db)
        inline = {"paymentMethod": {"type": "paypal"}}

        build_observer(state_data_service=service).execute(
            build_event(payment, {"stateData": json.dumps(inline)})
        )

        assert service.get_payment_method_variant(payment.quote_id) == "paypal"

    def test_without_session_there_is_no_fallback(self):
        """Test: sin sesión el fallback devuelve vacío."""
        service = StateDataService()
        payment = Payment(quote_id=42)

        build_observer(state_data_service=service).execute(
            build_event(payment, {"brand_code": "sepadirectdebit"})
        )

        assert service.get_state_data(42) == {}
        assert payment.get_additional_information() == {"brand_code": "sepadirectdebit"}


class TestSepa:
    """Datos SEPA necesarios para tokenizar el mandato."""

    def test_sepa_iban_and_owner_are_copied(self):
        """Test: brand SEPA copia iban y ownerName del state data."""
        payment = Payment(quote_id=3)

        build_observer().execute(
            build_event(
                payment,
                {"brand_code": "sepadirectdebit", "stateData": json.dumps(SEPA_STATE_DATA)},
            )
        )

        assert payment.get_additional_information() == {
            "brand_code": "sepadirectdebit",
            "iban": "NL13TEST0123456789",
            "ownerName": "A. Schneider",
        }
        assert payment.cc_type == "sepadirectdebit"

    def test_sepa_only_copies_present_fields(self):
        """Test: solo se copian los campos presentes."""
        payment = Payment(quote_id=3)
        state_data = {"paymentMethod": {"type": "sepadirectdebit", "iban": "DE00"}}

        build_observer().execute(
            build_event(payment, {"brand_code": "sepadirectdebit", "stateData": json.dumps(state_data)})
        )

        assert payment.get_additional_information("iban") == "DE00"
        assert not payment.has_additional_information("ownerName")

    def test_sepa_without_payment_method_object(self):
        """Test: paymentMethod que no es objeto no aporta datos."""
        payment = Payment(quote_id=3)
        state_data = {"paymentMethod": "sepadirectdebit"}

        build_observer().execute(
            build_event(payment, {"brand_code": "sepadirectdebit", "stateData": json.dumps(state_data)})
        )

        assert payment.get_additional_information() == {"brand_code": "sepadirectdebit"}

    def test_non_sepa_brand_does_not_copy_iban(self):
        """Test: iban en state data se ignora si la marca no es SEPA."""
        payment = Payment(quote_id=3)

        build_observer().execute(
            build_event(payment, {"brand_code": "ideal", "stateData": json.dumps(SEPA_STATE_DATA)})
        )

        assert not payment.has_additional_information("iban")
        assert not payment.has_additional_information("ownerName")


class TestVaultActivation:
    """cc_type y flag de vault según brand_code."""

    def test_brand_code_sets_cc_type(self):
        """Test: brand_code se copia a cc_type."""
        payment = Payment(quote_id=1)

        build_observer().execute(build_event(payment, {"brand_code": "paypal"}))

        assert payment.cc_type == "paypal"

    def test_vault_disabled_never_sets_flag(self):
        """Test: con el vault deshabilitado no se activa el token."""
        payment = Payment(quote_id=1)

        build_observer().execute(build_event(payment, {"brand_code": "paypal"}))

        assert not payment.has_additional_information(IS_ACTIVE_CODE)

    def test_vault_enabled_recurring_method_sets_flag(self, vault_settings):
        """Test: método recurrente con vault habilitado activa el token."""
        payment = Payment(quote_id=1)

        build_observer(vault_settings).execute(build_event(payment, {"brand_code": "paypal"}))

        assert payment.get_additional_information(IS_ACTIVE_CODE) is True

    def test_vault_enabled_non_recurring_method(self, vault_settings):
        """Test: iDEAL no admite recurrencia; no se activa el token."""
        payment = Payment(quote_id=1)

        build_observer(vault_settings).execute(build_event(payment, {"brand_code": "ideal"}))

        assert payment.cc_type == "ideal"
        assert not payment.has_additional_information(IS_ACTIVE_CODE)

    def test_unknown_brand_code_is_tolerated(self, vault_settings):
        """Test: brand_code sin método registrado fija cc_type sin vault."""
        payment = Payment(quote_id=1)

        build_observer(vault_settings).execute(build_event(payment, {"brand_code": "mystery_pay"}))

        assert payment.cc_type == "mystery_pay"
        assert not payment.has_additional_information(IS_ACTIVE_CODE)

    @pytest.mark.parametrize("brand_code", [{"x": 1}, ["ideal"], 5, True])
    def test_non_string_brand_code_is_ignored(self, vault_settings, brand_code):
        """Test: brand_code que no es texto no llega a cc_type ni al vault."""
        payment = Payment(quote_id=1)

        build_observer(vault_settings).execute(build_event(payment, {"brand_code": brand_code}))

        assert payment.cc_type is None
        assert not payment.has_additional_information(IS_ACTIVE_CODE)

    def test_too_long_brand_code_is_ignored(self, vault_settings):
        """Test: brand_code más largo que la columna cc_type se descarta."""
        payment = Payment(quote_id=1)

        build_observer(vault_settings).execute(build_event(payment, {"brand_code": "p" * 65}))

        assert payment.cc_type is None

    def test_vault_activation_logs_method_label(self, vault_settings, caplog):
        """Test: la activación del vault registra el nombre del método."""
        payment = Payment(quote_id=1)

        with caplog.at_level(logging.INFO, logger="app.modules.payments.observers.hpp_data_assign_observer"):
            build_observer(vault_settings).execute(build_event(payment, {"brand_code": "paypal"}))

        assert "Vault activado para PayPal" in caplog.text

    def test_token_type_must_be_supported(self):
        """Test: klarna_paynow admite Subscription pero no CardOnFile."""
        card_on_file = PaymentsSettings(_env_file=None, store_alternative_payment_method_enabled=True)
        subscription = PaymentsSettings(
            _env_file=None,
            store_alternative_payment_method_enabled=True,
            alternative_payment_method_token_type="Subscription",
        )
        first, second = Payment(quote_id=1), Payment(quote_id=1)

        build_observer(card_on_file).execute(build_event(first, {"brand_code": "klarna_paynow"}))
        build_observer(subscription).execute(build_event(second, {"brand_code": "klarna_paynow"}))

        assert not first.has_additional_information(IS_ACTIVE_CODE)
        assert second.get_additional_information(IS_ACTIVE_CODE) is True

    def test_sepa_with_vault_enabled(self, vault_settings):
        """Test: SEPA con vault habilitado guarda mandato y flag."""
        payment = Payment(quote_id=3)

        build_observer(vault_settings).execute(
            build_event(
                payment,
                {"brand_code": "sepadirectdebit", "stateData": json.dumps(SEPA_STATE_DATA)},
            )
        )

        info = payment.get_additional_information()
        assert info["iban"] == "NL13TEST0123456789"
        assert info[IS_ACTIVE_CODE] is True

    def test_without_brand_code_cc_type_untouched(self, vault_settings):
        """Test: sin brand_code no se toca cc_type ni el vault."""
        payment = Payment(quote_id=1)
        payment.set_cc_type("visa")

        build_observer(vault_settings).execute(build_event(payment, {"df_value": "x"}))

        assert payment.cc_type == "visa"
        assert not payment.has_additional_information(IS_ACTIVE_CODE)

# Fin del archivo backend/tests/modules/payments/observers/test_hpp_data_assign_observer.py
