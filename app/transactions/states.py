"""
State and type enums for payment operations.

These are Django TextChoices for database storage and admin integration.
The status field is driven by django-fsm transitions on Transaction.

Transaction States:
    pending → confirmed          (transfer_completed)
    pending → error              (transfer_failed)
    pending/confirmed → reversed (transfer_reversed)

Terminal states: ERROR, REVERSED. CONFIRMED only accepts a reversal.
"""

from django.db import models


class TransactionStatus(models.TextChoices):
    """Lifecycle of a payment operation on the rail."""

    PENDING = "pending", "Pending"
    CONFIRMED = "confirmed", "Confirmed"
    ERROR = "error", "Error"
    REVERSED = "reversed", "Reversed"


class TransactionType(models.TextChoices):
    """Payment direction/category. Immutable once the operation exists."""

    CASHIN_COELSA = "cashin_coelsa", "Cash-in (COELSA)"
    CASHOUT_COELSA = "cashout_coelsa", "Cash-out (COELSA)"
    REFOUND_COELSA = "refound_coelsa", "Refund (COELSA)"
    TRANSFER = "transfer", "Internal transfer"
    PAYMENT = "payment", "Payment"


TERMINAL_STATUSES = frozenset({TransactionStatus.ERROR, TransactionStatus.REVERSED})

# Operation types that move money through the COELSA rail and are reported
# in the compliance history extract.
COELSA_TRANSACTION_TYPES = (
    TransactionType.CASHIN_COELSA,
    TransactionType.CASHOUT_COELSA,
)


__all__ = [
    "COELSA_TRANSACTION_TYPES",
    "TERMINAL_STATUSES",
    "TransactionStatus",
    "TransactionType",
]
