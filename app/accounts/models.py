"""
User account model.

A UserAccount is a wallet held by a user. Accounts of type BIND are backed by
a CVU (the virtual account identifier issued through the BIND banking
partner) and are the population reported in compliance extracts.

Usage:
    from accounts.models import AccountStatus, AccountType, UserAccount

    UserAccount.objects.filter(type=AccountType.BIND, status=AccountStatus.ENABLE)
"""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings
from django.db import models

from core.managers import SoftDeleteManager
from core.model_mixins import SoftDeleteMixin, UUIDPrimaryKeyMixin
from core.models import BaseModel


class AccountType(models.TextChoices):
    """Kind of account. Only BIND accounts carry a CVU."""

    BIND = "bind", "BIND (CVU)"
    INTERNAL = "internal", "Internal"
    CREDIT = "credit", "Credit"
    DEBIT = "debit", "Debit"


class AccountStatus(models.TextChoices):
    """
    Account lifecycle.

    PENDING -> ENABLE once onboarding completes; ENABLE <-> DISABLE by
    operators; ERROR when provisioning with the bank failed.
    """

    PENDING = "pending", "Pending"
    ENABLE = "enable", "Enabled"
    DISABLE = "disable", "Disabled"
    ERROR = "error", "Error"


class UserAccount(UUIDPrimaryKeyMixin, SoftDeleteMixin, BaseModel):
    """
    A user's wallet account.

    Fields:
        user: Owner of the account (null for platform-owned accounts)
        type: AccountType
        status: AccountStatus
        cvu: 22-digit virtual account identifier (BIND accounts only)
        alias: Human-friendly alias for the CVU
        balance: Current balance in the account currency
        currency: ISO 4217 code
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="accounts",
        null=True,
        blank=True,
    )
    type = models.CharField(
        max_length=20,
        choices=AccountType.choices,
        default=AccountType.BIND,
        db_index=True,
    )
    status = models.CharField(
        max_length=20,
        choices=AccountStatus.choices,
        default=AccountStatus.PENDING,
        db_index=True,
    )
    cvu = models.CharField(
        max_length=22,
        unique=True,
        null=True,
        blank=True,
        help_text="Clave Virtual Uniforme assigned by the bank",
    )
    alias = models.CharField(max_length=50, blank=True, default="")
    balance = models.DecimalField(
        max_digits=18,
        decimal_places=2,
        null=True,
        blank=True,
        default=Decimal("0.00"),
    )
    currency = models.CharField(max_length=3, default="ARS")

    objects = SoftDeleteManager()
    all_objects = models.Manager()

    class Meta:
        db_table = "users_accounts"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["type", "status"], name="account_type_status_idx"),
        ]

    def __str__(self) -> str:
        return f"UserAccount({self.type}, cvu={self.cvu or '-'}, {self.status})"
