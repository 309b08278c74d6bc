"""
Compliance extracts for the regulator (BCRA).

Both extracts are protected by a shared passphrase/secret pair sent as
request headers, not by user authentication. The history extract can use
its own pair; when unset it falls back to the summary pair.

Usage:
    from compliance.services import ComplianceCredentials, ComplianceService

    service = ComplianceService(ComplianceCredentials.from_settings())
    summary = service.get_cvu_summary(passphrase, secret)
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from django.conf import settings
from django.db.models import Count, DecimalField, Q, Sum, Value
from django.db.models.functions import Coalesce

from accounts.models import AccountStatus, AccountType, UserAccount
from core.exceptions import AuthenticationError
from core.helpers import secrets_match, utc_now_iso
from core.services import BaseService
from transactions.models import Transaction
from transactions.states import COELSA_TRANSACTION_TYPES

HISTORY_LIMIT = 1000


@dataclass(frozen=True)
class ComplianceCredentials:
    """Passphrase/secret pairs for the two extracts."""

    summary_passphrase: str = ""
    summary_secret: str = ""
    history_passphrase: str = ""
    history_secret: str = ""

    @classmethod
    def from_settings(cls) -> ComplianceCredentials:
        passphrase = getattr(settings, "BCRA_PASSPHRASE", "")
        secret = getattr(settings, "BCRA_SECRET", "")
        return cls(
            summary_passphrase=passphrase,
            summary_secret=secret,
            history_passphrase=getattr(settings, "BCRA_HISTORY_PASSPHRASE", "") or passphrase,
            history_secret=getattr(settings, "BCRA_HISTORY_SECRET", "") or secret,
        )


class ComplianceService(BaseService):
    """Builds the CVU summary and CVU history extracts."""

    def __init__(self, credentials: ComplianceCredentials):
        self.credentials = credentials

    def validate_summary_auth(self, passphrase: str | None, secret: str | None) -> bool:
        return secrets_match(passphrase, self.credentials.summary_passphrase) and secrets_match(
            secret, self.credentials.summary_secret
        )

    def validate_history_auth(self, passphrase: str | None, secret: str | None) -> bool:
        return secrets_match(passphrase, self.credentials.history_passphrase) and secrets_match(
            secret, self.credentials.history_secret
        )

    def get_cvu_summary(self, passphrase: str | None, secret: str | None) -> dict[str, Any]:
        """
        Aggregate figures over live CVU (bind) accounts.

        Raises:
            AuthenticationError: Credentials missing or wrong
        """
        if not self.validate_summary_auth(passphrase, secret):
            self.get_logger().warning("Rejected CVU summary request: invalid credentials")
            raise AuthenticationError("Invalid credentials")

        totals = UserAccount.objects.filter(type=AccountType.BIND).aggregate(
            total_accounts=Count("id"),
            total_balance=Coalesce(
                Sum("balance"),
                Value(Decimal("0.00")),
                output_field=DecimalField(max_digits=18, decimal_places=2),
            ),
            active_accounts=Count("id", filter=Q(status=AccountStatus.ENABLE)),
        )

        self.get_logger().info(
            "Generated CVU summary",
            extra={"total_accounts": totals["total_accounts"]},
        )
        return {
            "totalAccounts": totals["total_accounts"],
            "totalBalance": totals["total_balance"],
            "activeAccounts": totals["active_accounts"],
            "generatedAt": utc_now_iso(),
        }

    def get_cvu_history(self, passphrase: str | None, secret: str | None) -> dict[str, Any]:
        """
        Newest COELSA cash-in/cash-out transactions, capped at HISTORY_LIMIT.

        Raises:
            AuthenticationError: Credentials missing or wrong
        """
        if not self.validate_history_auth(passphrase, secret):
            self.get_logger().warning("Rejected CVU history request: invalid credentials")
            raise AuthenticationError("Invalid credentials")

        rows = (
            Transaction.objects.filter(type__in=COELSA_TRANSACTION_TYPES)
            .order_by("-created_at")
            .values(
                "id",
                "type",
                "status",
                "amount",
                "created_at",
                "source_account_id",
                "target_account_id",
            )[:HISTORY_LIMIT]
        )
        transactions = [
            {
                "id": row["id"],
                "type": row["type"],
                "status": row["status"],
                "amount": row["amount"],
                "createdAt": row["created_at"],
                "sourceAccountId": row["source_account_id"],
                "targetAccountId": row["target_account_id"],
            }
            for row in rows
        ]

        self.get_logger().info("Generated CVU history", extra={"count": len(transactions)})
        return {
            "transactions": transactions,
            "count": len(transactions),
            "generatedAt": utc_now_iso(),
        }
