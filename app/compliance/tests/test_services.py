"""
Tests for ComplianceService and ComplianceCredentials.
"""

from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone

from accounts.models import AccountStatus, AccountType
from accounts.tests.factories import UserAccountFactory
from compliance.services import HISTORY_LIMIT, ComplianceCredentials, ComplianceService
from core.exceptions import AuthenticationError
from transactions.models import Transaction
from transactions.states import TransactionType
from transactions.tests.factories import TransactionFactory

CREDENTIALS = ComplianceCredentials(
    summary_passphrase="summary-pass",
    summary_secret="summary-secret",
    history_passphrase="history-pass",
    history_secret="history-secret",
)


@pytest.fixture
def service():
    return ComplianceService(CREDENTIALS)


# =============================================================================
# Credentials
# =============================================================================


class TestComplianceCredentials:
    def test_from_settings(self, settings):
        settings.BCRA_PASSPHRASE = "p"
        settings.BCRA_SECRET = "s"
        settings.BCRA_HISTORY_PASSPHRASE = "hp"
        settings.BCRA_HISTORY_SECRET = "hs"

        assert ComplianceCredentials.from_settings() == ComplianceCredentials("p", "s", "hp", "hs")

    def test_history_falls_back_to_summary(self, settings):
        settings.BCRA_PASSPHRASE = "p"
        settings.BCRA_SECRET = "s"
        settings.BCRA_HISTORY_PASSPHRASE = ""
        settings.BCRA_HISTORY_SECRET = ""

        credentials = ComplianceCredentials.from_settings()

        assert credentials.history_passphrase == "p"
        assert credentials.history_secret == "s"


class TestValidateAuth:
    def test_summary_pair(self, service):
        assert service.validate_summary_auth("summary-pass", "summary-secret")
        assert not service.validate_summary_auth("summary-pass", "wrong")
        assert not service.validate_summary_auth("history-pass", "history-secret")

    def test_history_pair(self, service):
        assert service.validate_history_auth("history-pass", "history-secret")
        assert not service.validate_history_auth("summary-pass", "summary-secret")

    @pytest.mark.parametrize(
        "passphrase, secret",
        [(None, "summary-secret"), ("summary-pass", None), ("", ""), (None, None)],
    )
    def test_missing_headers_never_match(self, service, passphrase, secret):
        assert not service.validate_summary_auth(passphrase, secret)

    def test_unconfigured_credentials_reject_everything(self):
        service = ComplianceService(ComplianceCredentials())

        assert not service.validate_summary_auth("", "")
        assert not service.validate_history_auth(None, None)


# =============================================================================
# CVU summary
# =============================================================================


@pytest.mark.django_db
class TestCvuSummary:
    def test_rejects_bad_credentials(self, service):
        with pytest.raises(AuthenticationError) as exc_info:
            service.get_cvu_summary("summary-pass", "nope")

        assert exc_info.value.message == "Invalid credentials"

    def test_aggregates_live_bind_accounts(self, service):
        UserAccountFactory(balance=Decimal("100.50"), status=AccountStatus.ENABLE)
        UserAccountFactory(balance=Decimal("49.50"), status=AccountStatus.DISABLE)
        UserAccountFactory(balance=None, status=AccountStatus.ENABLE, cvu=None)
        UserAccountFactory(type=AccountType.INTERNAL, balance=Decimal("999.00"), cvu=None)
        UserAccountFactory(balance=Decimal("1000.00")).soft_delete()

        summary = service.get_cvu_summary("summary-pass", "summary-secret")

        assert summary["totalAccounts"] == 3
        assert summary["totalBalance"] == Decimal("150.00")
        assert summary["activeAccounts"] == 2
        assert summary["generatedAt"].endswith("Z")

    def test_no_accounts(self, service):
        summary = service.get_cvu_summary("summary-pass", "summary-secret")

        assert summary["totalAccounts"] == 0
        assert summary["totalBalance"] == Decimal("0")
        assert summary["activeAccounts"] == 0


# =============================================================================
# CVU history
# =============================================================================


@pytest.mark.django_db
class TestCvuHistory:
    def test_rejects_summary_credentials(self, service):
        with pytest.raises(AuthenticationError):
            service.get_cvu_history("summary-pass", "summary-secret")

    def test_only_live_coelsa_cash_movements(self, service):
        cash_in = TransactionFactory(type=TransactionType.CASHIN_COELSA)
        cash_out = TransactionFactory(type=TransactionType.CASHOUT_COELSA)
        TransactionFactory(type=TransactionType.TRANSFER)
        TransactionFactory(type=TransactionType.REFOUND_COELSA)
        TransactionFactory(type=TransactionType.CASHIN_COELSA).soft_delete()

        history = service.get_cvu_history("history-pass", "history-secret")

        assert history["count"] == 2
        assert {row["id"] for row in history["transactions"]} == {cash_in.id, cash_out.id}

    def test_row_projection(self, service):
        txn = TransactionFactory()

        row = service.get_cvu_history("history-pass", "history-secret")["transactions"][0]

        assert row == {
            "id": txn.id,
            "type": txn.type,
            "status": txn.status,
            "amount": txn.amount,
            "createdAt": Transaction.objects.get(pk=txn.pk).created_at,
            "sourceAccountId": None,
            "targetAccountId": txn.target_account_id,
        }

    def test_newest_first_and_capped(self, service, monkeypatch):
        monkeypatch.setattr("compliance.services.HISTORY_LIMIT", 3)
        base = timezone.now() - timedelta(hours=1)
        created = TransactionFactory.create_batch(5)
        for index, txn in enumerate(created):
            Transaction.objects.filter(pk=txn.pk).update(created_at=base + timedelta(minutes=index))

        history = service.get_cvu_history("history-pass", "history-secret")

        assert history["count"] == 3
        assert [row["id"] for row in history["transactions"]] == [
            created[4].id,
            created[3].id,
            created[2].id,
        ]

    def test_default_limit(self):
        assert HISTORY_LIMIT == 1000
