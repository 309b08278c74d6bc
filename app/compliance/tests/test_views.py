"""
Tests for the compliance extract endpoints.
"""

import pytest

from accounts.tests.factories import UserAccountFactory
from transactions.tests.factories import TransactionFactory

SUMMARY_URL = "/api/v1/compliance/cvu-summary/"
HISTORY_URL = "/api/v1/compliance/cvu-history/"


@pytest.fixture(autouse=True)
def bcra_credentials(settings):
    settings.BCRA_PASSPHRASE = "bcra-pass"
    settings.BCRA_SECRET = "bcra-secret"
    settings.BCRA_HISTORY_PASSPHRASE = ""
    settings.BCRA_HISTORY_SECRET = ""


@pytest.mark.django_db
class TestCvuSummaryView:
    def test_valid_headers(self, api_client):
        UserAccountFactory()

        response = api_client.get(
            SUMMARY_URL, HTTP_X_PASSPHRASE="bcra-pass", HTTP_X_SECRET="bcra-secret"
        )

        assert response.status_code == 200
        body = response.json()
        assert body["totalAccounts"] == 1
        assert body["activeAccounts"] == 1
        assert set(body) == {"totalAccounts", "totalBalance", "activeAccounts", "generatedAt"}

    def test_wrong_secret(self, api_client):
        response = api_client.get(
            SUMMARY_URL, HTTP_X_PASSPHRASE="bcra-pass", HTTP_X_SECRET="nope"
        )

        assert response.status_code == 401
        assert response.json()["error"] == "Invalid credentials"

    def test_missing_headers(self, api_client):
        assert api_client.get(SUMMARY_URL).status_code == 401

    def test_jwt_user_without_headers_rejected(self, authenticated_client):
        assert authenticated_client.get(SUMMARY_URL).status_code == 401


@pytest.mark.django_db
class TestCvuHistoryView:
    def test_falls_back_to_summary_credentials(self, api_client):
        TransactionFactory()

        response = api_client.get(
            HISTORY_URL, HTTP_X_PASSPHRASE="bcra-pass", HTTP_X_SECRET="bcra-secret"
        )

        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 1
        assert set(body["transactions"][0]) == {
            "id",
            "type",
            "status",
            "amount",
            "createdAt",
            "sourceAccountId",
            "targetAccountId",
        }

    def test_dedicated_history_credentials(self, api_client, settings):
        settings.BCRA_HISTORY_PASSPHRASE = "history-pass"
        settings.BCRA_HISTORY_SECRET = "history-secret"

        rejected = api_client.get(
            HISTORY_URL, HTTP_X_PASSPHRASE="bcra-pass", HTTP_X_SECRET="bcra-secret"
        )
        accepted = api_client.get(
            HISTORY_URL, HTTP_X_PASSPHRASE="history-pass", HTTP_X_SECRET="history-secret"
        )

        assert rejected.status_code == 401
        assert accepted.status_code == 200
