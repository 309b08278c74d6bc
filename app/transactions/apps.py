"""
Transactions app configuration.

Owns the payment operation records that payment-rail webhooks reconcile
and the authenticated list/detail API over them.
"""

from django.apps import AppConfig


class TransactionsConfig(AppConfig):
    """Configuration for the transactions application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "transactions"
    verbose_name = "Transactions"
