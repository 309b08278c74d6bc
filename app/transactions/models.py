"""
Transaction model for payment operations.

A Transaction is created when a payment is initiated (outside the webhook
path) and is later advanced by payment-rail webhooks. Webhooks never
create transactions.

Usage:
    from transactions.models import Transaction
    from transactions.states import TransactionStatus

    txn = Transaction.objects.get(coelsa_id="op-123")
    txn.confirm()  # pending -> confirmed
    txn.save(update_fields=["status", "updated_at"])
"""

from __future__ import annotations

from django.db import models

from django_fsm import FSMField, transition

from accounts.models import UserAccount
from core.managers import SoftDeleteManager
from core.model_mixins import SoftDeleteMixin, UUIDPrimaryKeyMixin
from core.models import BaseModel

from transactions.states import TERMINAL_STATUSES, TransactionStatus, TransactionType


class Transaction(UUIDPrimaryKeyMixin, SoftDeleteMixin, BaseModel):
    """
    A payment operation tracked through the COELSA rail.

    State Flow:
        PENDING -> CONFIRMED -> REVERSED
        PENDING -> ERROR
        PENDING -> REVERSED

    Fields:
        coelsa_id: Identifier assigned by the payment rail (unique when set)
        status: Current state (django-fsm)
        amount: Operation amount, fixed at creation
        type: TransactionType, fixed at creation
        source_account / target_account: Accounts debited and credited
        reverse_coelsa_id: Rail identifier of the reversal, set on reversal
    """

    coelsa_id = models.CharField(
        max_length=100,
        unique=True,
        null=True,
        blank=True,
        help_text="Operation identifier assigned by COELSA",
    )
    status = FSMField(
        default=TransactionStatus.PENDING,
        choices=TransactionStatus.choices,
        db_index=True,
    )
    amount = models.DecimalField(max_digits=18, decimal_places=2)
    type = models.CharField(
        max_length=30,
        choices=TransactionType.choices,
        db_index=True,
    )
    currency = models.CharField(max_length=3, default="ARS")
    country = models.CharField(max_length=2, default="ar")
    code = models.CharField(max_length=50, blank=True, default="")
    reference = models.CharField(max_length=255, blank=True, default="")
    reason = models.CharField(max_length=255, blank=True, default="")
    source_account = models.ForeignKey(
        UserAccount,
        on_delete=models.PROTECT,
        related_name="outgoing_transactions",
        null=True,
        blank=True,
    )
    target_account = models.ForeignKey(
        UserAccount,
        on_delete=models.PROTECT,
        related_name="incoming_transactions",
        null=True,
        blank=True,
    )
    reverse_coelsa_id = models.CharField(
        max_length=100,
        null=True,
        blank=True,
        help_text="COELSA identifier of the reversal operation",
    )

    objects = SoftDeleteManager()
    all_objects = models.Manager()

    class Meta:
        db_table = "transactions"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["type", "-created_at"], name="txn_type_created_idx"),
        ]

    def __str__(self) -> str:
        return f"Transaction({self.type}, {self.amount}, {self.status})"

    @property
    def is_terminal(self) -> bool:
        """No webhook can move this transaction any further."""
        return self.status in TERMINAL_STATUSES

    @transition(
        field=status,
        source=TransactionStatus.PENDING,
        target=TransactionStatus.CONFIRMED,
    )
    def confirm(self) -> None:
        """Transfer settled on the rail (transfer_completed)."""

    @transition(
        field=status,
        source=TransactionStatus.PENDING,
        target=TransactionStatus.ERROR,
    )
    def fail(self) -> None:
        """Transfer rejected by the rail (transfer_failed)."""

    @transition(
        field=status,
        source=[TransactionStatus.PENDING, TransactionStatus.CONFIRMED],
        target=TransactionStatus.REVERSED,
    )
    def reverse(self, reverse_coelsa_id: str | None = None) -> None:
        """
        Transfer reversed on the rail (transfer_reversed).

        Args:
            reverse_coelsa_id: Rail identifier of the reversal operation
        """
        self.reverse_coelsa_id = reverse_coelsa_id
