"""
Accounts app configuration.

Holds the user accounts (CVU) whose balances feed the compliance extracts
and that transactions move money between.
"""

from django.apps import AppConfig


class AccountsConfig(AppConfig):
    """Configuration for the accounts application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "accounts"
    verbose_name = "Accounts"
