"""
COELSA app configuration.

Integration with the COELSA interbank transfer rail: webhook reconciliation
of payment operations plus authenticated operator endpoints.
"""

from django.apps import AppConfig


class CoelsaConfig(AppConfig):
    """Configuration for the COELSA application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "coelsa"
    verbose_name = "COELSA"
