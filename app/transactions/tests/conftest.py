"""
Pytest fixtures for transaction tests.

Fixtures provide transactions in each status so transitions can be
exercised directly.
"""

import pytest

from accounts.tests.factories import UserAccountFactory
from transactions.states import TransactionStatus
from transactions.tests.factories import TransactionFactory


@pytest.fixture
def account(db, user):
    """Enabled CVU account owned by `user`."""
    return UserAccountFactory(user=user)


@pytest.fixture
def pending_transaction(db):
    return TransactionFactory(status=TransactionStatus.PENDING)


@pytest.fixture
def confirmed_transaction(db):
    return TransactionFactory(status=TransactionStatus.CONFIRMED)


@pytest.fixture
def failed_transaction(db):
    return TransactionFactory(status=TransactionStatus.ERROR)


@pytest.fixture
def reversed_transaction(db):
    return TransactionFactory(status=TransactionStatus.REVERSED)
