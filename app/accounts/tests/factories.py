"""
Factory Boy factories for account test data.

Usage:
    from accounts.tests.factories import UserAccountFactory, UserFactory

    account = UserAccountFactory(status=AccountStatus.ENABLE, balance=Decimal("10.00"))
"""

from decimal import Decimal

import factory
from django.conf import settings

from accounts.models import AccountStatus, AccountType, UserAccount


class UserFactory(factory.django.DjangoModelFactory):
    """Factory for the default Django user model."""

    class Meta:
        model = settings.AUTH_USER_MODEL
        skip_postgeneration_save = True

    username = factory.Sequence(lambda n: f"user{n}")
    email = factory.Sequence(lambda n: f"user{n}@example.com")
    password = factory.PostGenerationMethodCall("set_password", "testpass123")
    is_active = True


class UserAccountFactory(factory.django.DjangoModelFactory):
    """Factory for BIND (CVU) accounts, enabled by default."""

    class Meta:
        model = UserAccount

    user = factory.SubFactory(UserFactory)
    type = AccountType.BIND
    status = AccountStatus.ENABLE
    cvu = factory.Sequence(lambda n: f"{n:022d}")
    alias = factory.Sequence(lambda n: f"alias.cuenta.{n}")
    balance = Decimal("100.00")
    currency = "ARS"
