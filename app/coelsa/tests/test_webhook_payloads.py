"""
Tests for webhook action parsing, payload normalisation and config.
"""

import pytest

from coelsa.webhooks import CoelsaWebhookAction, CoelsaWebhookConfig, CoelsaWebhookPayload


class TestCoelsaWebhookAction:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("transfer_completed", CoelsaWebhookAction.TRANSFER_COMPLETED),
            ("transfer_failed", CoelsaWebhookAction.TRANSFER_FAILED),
            ("transfer_reversed", CoelsaWebhookAction.TRANSFER_REVERSED),
        ],
    )
    def test_known_actions(self, raw, expected):
        assert CoelsaWebhookAction.parse(raw) is expected

    @pytest.mark.parametrize("raw", ["bogus", "TRANSFER_COMPLETED", ""])
    def test_unknown_actions(self, raw):
        assert CoelsaWebhookAction.parse(raw) is None


class TestCoelsaWebhookPayload:
    def test_coelsa_id(self):
        payload = CoelsaWebhookPayload.from_data({"coelsaId": "OP-1"})

        assert payload.coelsa_id == "OP-1"
        assert payload.reverse_id is None

    def test_operation_id_fallback(self):
        payload = CoelsaWebhookPayload.from_data({"operationId": "OP-9"})

        assert payload.coelsa_id == "OP-9"

    def test_coelsa_id_wins_over_operation_id(self):
        payload = CoelsaWebhookPayload.from_data({"coelsaId": "OP-1", "operationId": "OP-9"})

        assert payload.coelsa_id == "OP-1"

    @pytest.mark.parametrize("falsy", [0, False, None, ""])
    def test_falsy_coelsa_id_falls_back(self, falsy):
        payload = CoelsaWebhookPayload.from_data({"coelsaId": falsy, "operationId": "OP-9"})

        assert payload.coelsa_id == "OP-9"

    def test_falsy_ids_are_absent(self):
        payload = CoelsaWebhookPayload.from_data({"coelsaId": 0, "operationId": False, "reverseId": 0})

        assert payload == CoelsaWebhookPayload()

    def test_numeric_ids_are_stringified(self):
        payload = CoelsaWebhookPayload.from_data({"coelsaId": 12345, "reverseId": 7})

        assert payload.coelsa_id == "12345"
        assert payload.reverse_id == "7"

    @pytest.mark.parametrize("data", [None, [], ["OP-1"], "OP-1", 42])
    def test_non_object_bodies_are_empty(self, data):
        assert CoelsaWebhookPayload.from_data(data) == CoelsaWebhookPayload()


class TestCoelsaWebhookConfig:
    def test_verification_off_without_secret(self):
        assert not CoelsaWebhookConfig().verifies_signatures

    def test_from_settings(self, settings):
        settings.COELSA_WEBHOOK_SECRET = "shh"
        settings.COELSA_WEBHOOK_SIGNATURE_HEADER = "X-Coelsa-Signature"
        settings.COELSA_WEBHOOK_SIGNATURE_ALGORITHM = "sha512"

        config = CoelsaWebhookConfig.from_settings()

        assert config == CoelsaWebhookConfig(
            secret="shh", signature_header="X-Coelsa-Signature", algorithm="sha512"
        )
        assert config.verifies_signatures
