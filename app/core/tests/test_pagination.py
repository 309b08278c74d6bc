"""
Tests for cursor pagination.

build_result() is exercised on plain dicts; paginate() against the
Transaction table.
"""

import uuid
from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone

from core.pagination import (
    CursorPage,
    CursorPaginationParams,
    CursorPaginationQuerySerializer,
    CursorPaginator,
)
from transactions.models import Transaction
from transactions.tests.factories import TransactionFactory


def _records(count):
    return [{"id": f"key-{index}"} for index in range(1, count + 1)]


# =============================================================================
# Params
# =============================================================================


class TestCursorPaginationParams:
    @pytest.mark.parametrize("take", [0, -1, 1.5, "10", True])
    def test_take_must_be_positive_int(self, take):
        with pytest.raises(ValueError):
            CursorPaginationParams(take=take)

    def test_sort_order_must_be_known(self):
        with pytest.raises(ValueError):
            CursorPaginationParams(take=10, sort_order="up")

    def test_defaults(self):
        params = CursorPaginationParams(take=5)

        assert params.cursor is None
        assert params.sort_by is None
        assert params.sort_order is None


# =============================================================================
# Result Building
# =============================================================================


class TestBuildResult:
    paginator = CursorPaginator()

    def test_extra_record_means_more(self):
        page = self.paginator.build_result(_records(11), take=10)

        assert len(page.data) == 10
        assert page.has_more is True
        assert page.next_cursor == "key-10"
        assert page.previous_cursor == "key-1"
        assert page.has_previous is False

    def test_exactly_take_records_is_last_page(self):
        page = self.paginator.build_result(_records(10), take=10)

        assert len(page.data) == 10
        assert page.has_more is False
        assert page.next_cursor is None

    def test_empty(self):
        page = self.paginator.build_result([], take=10)

        assert page.data == []
        assert page.next_cursor is None
        assert page.previous_cursor is None
        assert page.has_more is False

    def test_reads_key_from_attributes(self):
        class Item:
            def __init__(self, code):
                self.code = code

        paginator = CursorPaginator(key_field="code")
        page = paginator.build_result([Item("a"), Item("b")], take=1)

        assert page.next_cursor == "a"


class TestCursorPageToDict:
    def test_camel_case_and_string_cursors(self):
        key = uuid.uuid4()
        page = CursorPage(data=[1], next_cursor=key, previous_cursor=key, has_more=True)

        assert page.to_dict() == {
            "data": [1],
            "nextCursor": str(key),
            "previousCursor": str(key),
            "hasMore": True,
            "hasPrevious": False,
        }

    def test_serializer_applied_to_data(self):
        page = CursorPage(data=[1, 2])

        assert page.to_dict(lambda items: [item * 10 for item in items])["data"] == [10, 20]


# =============================================================================
# Database Paging
# =============================================================================


@pytest.mark.django_db
class TestPaginateQueryset:
    paginator = CursorPaginator()

    @pytest.fixture
    def transactions(self):
        """Five transactions with increasing created_at, oldest first."""
        base = timezone.now() - timedelta(hours=1)
        created = []
        for index in range(5):
            txn = TransactionFactory(amount=Decimal(10 * (index + 1)))
            Transaction.objects.filter(pk=txn.pk).update(created_at=base + timedelta(minutes=index))
            created.append(txn)
        return created

    def test_defaults_to_newest_first(self, transactions):
        page = self.paginator.paginate(Transaction.objects.all(), CursorPaginationParams(take=2))

        assert [txn.pk for txn in page.data] == [transactions[4].pk, transactions[3].pk]
        assert page.next_cursor == transactions[3].pk

    def test_cursor_is_exclusive(self, transactions):
        params = CursorPaginationParams(take=2, cursor=transactions[3].pk)

        page = self.paginator.paginate(Transaction.objects.all(), params)

        assert [txn.pk for txn in page.data] == [transactions[2].pk, transactions[1].pk]
        assert page.has_more is True

    def test_ascending(self, transactions):
        params = CursorPaginationParams(take=3, sort_order="asc")

        page = self.paginator.paginate(Transaction.objects.all(), params)

        assert [txn.pk for txn in page.data] == [txn.pk for txn in transactions[:3]]

    def test_ascending_from_cursor(self, transactions):
        params = CursorPaginationParams(take=10, cursor=transactions[2].pk, sort_order="asc")

        page = self.paginator.paginate(Transaction.objects.all(), params)

        assert [txn.pk for txn in page.data] == [transactions[3].pk, transactions[4].pk]
        assert page.has_more is False

    def test_sort_by_other_field(self, transactions):
        params = CursorPaginationParams(take=5, sort_by="amount", sort_order="desc")

        page = self.paginator.paginate(Transaction.objects.all(), params)

        assert [txn.amount for txn in page.data] == sorted(
            (txn.amount for txn in transactions), reverse=True
        )

    def test_ties_broken_by_key(self):
        TransactionFactory.create_batch(4, amount=Decimal("5.00"))
        queryset = Transaction.objects.all()

        first = self.paginator.paginate(
            queryset, CursorPaginationParams(take=2, sort_by="amount")
        )
        second = self.paginator.paginate(
            queryset, CursorPaginationParams(take=2, sort_by="amount", cursor=first.next_cursor)
        )

        seen = [txn.pk for txn in first.data + second.data]
        assert len(set(seen)) == 4

    @pytest.mark.parametrize("cursor", ["not-a-uuid", str(uuid.uuid4())])
    def test_unresolvable_cursor_gives_empty_page(self, transactions, cursor):
        params = CursorPaginationParams(take=2, cursor=cursor)

        page = self.paginator.paginate(Transaction.objects.all(), params)

        assert page.data == []
        assert page.has_more is False

    def test_walk_covers_every_row_once(self, transactions):
        seen = []
        cursor = None
        while True:
            page = self.paginator.paginate(
                Transaction.objects.all(), CursorPaginationParams(take=2, cursor=cursor)
            )
            seen.extend(txn.pk for txn in page.data)
            if not page.has_more:
                break
            cursor = page.next_cursor

        assert seen == [txn.pk for txn in reversed(transactions)]


# =============================================================================
# Query Serializer
# =============================================================================


class TestCursorPaginationQuerySerializer:
    def test_defaults(self):
        serializer = CursorPaginationQuerySerializer(data={})
        assert serializer.is_valid(), serializer.errors

        params = serializer.to_params()

        assert params.take == 20
        assert params.cursor is None

    @pytest.mark.parametrize("take", ["0", "101", "abc"])
    def test_take_bounds(self, take):
        assert not CursorPaginationQuerySerializer(data={"take": take}).is_valid()

    def test_sort_by_restricted(self):
        serializer = CursorPaginationQuerySerializer(data={"sort_by": "amount"})

        assert not serializer.is_valid()
        assert "sort_by" in serializer.errors
