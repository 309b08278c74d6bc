"""
Pytest fixtures for COELSA tests.
"""

import pytest

from coelsa.services import CoelsaService
from transactions.states import TransactionStatus
from transactions.tests.factories import TransactionFactory


@pytest.fixture
def service():
    return CoelsaService()


@pytest.fixture
def pending_operation(db):
    """Pending transaction known to COELSA as OP-1."""
    return TransactionFactory(coelsa_id="OP-1", status=TransactionStatus.PENDING)


@pytest.fixture
def confirmed_operation(db):
    return TransactionFactory(coelsa_id="OP-2", status=TransactionStatus.CONFIRMED)


@pytest.fixture
def reversed_operation(db):
    return TransactionFactory(coelsa_id="OP-3", status=TransactionStatus.REVERSED)
