"""
Read-side service for a user's transactions.

Builds list filters with core.querying and pages them with
core.pagination.CursorPaginator.

Usage:
    from transactions.services import TransactionQueryService

    page = TransactionQueryService.list_for_user(user, filters, params)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from django.db.models import Q, QuerySet

from accounts.models import UserAccount
from core.exceptions import NotFoundError
from core.helpers import validate_uuid
from core.pagination import CursorPage, CursorPaginationParams, CursorPaginator
from core.querying import (
    build_range_query,
    build_search_query,
    build_where_clause,
    condition_to_q,
    merge_conditions,
)
from core.services import BaseService

from transactions.models import Transaction

if TYPE_CHECKING:
    from collections.abc import Mapping

SEARCH_FIELDS = ("code", "reference", "reason")

# Request filter name -> ORM lookup (or value transform).
FILTER_MAPPING = {
    "country": lambda value: {"country": value.lower()},
    "currency": lambda value: {"currency": value.upper()},
}


class TransactionQueryService(BaseService):
    """Lists and fetches transactions visible to one user."""

    paginator = CursorPaginator(default_sort_by="created_at", key_field="id")

    @classmethod
    def account_ids_for(cls, user) -> set:
        return set(UserAccount.objects.filter(user=user).values_list("id", flat=True))

    @classmethod
    def visible_to(cls, account_ids: set) -> QuerySet:
        """Non-deleted transactions where one of the accounts is a party."""
        return Transaction.objects.filter(
            Q(source_account_id__in=account_ids) | Q(target_account_id__in=account_ids)
        )

    @classmethod
    def build_filter(cls, filters: Mapping[str, Any]) -> Q:
        """
        Translate validated list filters into one Q.

        Blank filters are dropped; amount and date bounds become inclusive
        ranges; search matches code, reference or reason case-insensitively.
        """
        where = build_where_clause(
            {
                "status": filters.get("status"),
                "type": filters.get("type"),
                "country": filters.get("country"),
                "currency": filters.get("currency"),
            },
            FILTER_MAPPING,
        )
        search = filters.get("search")

        return merge_conditions(
            where,
            condition_to_q(
                "created_at",
                build_range_query(filters.get("start_date"), filters.get("end_date")),
            ),
            condition_to_q(
                "amount",
                build_range_query(filters.get("min_amount"), filters.get("max_amount")),
            ),
            build_search_query(search, SEARCH_FIELDS) if search else None,
        )

    @classmethod
    def list_for_user(
        cls,
        user,
        filters: Mapping[str, Any],
        params: CursorPaginationParams,
        account_ids: set | None = None,
    ) -> CursorPage[Transaction]:
        if account_ids is None:
            account_ids = cls.account_ids_for(user)

        queryset = cls.visible_to(account_ids).filter(cls.build_filter(filters))
        page = cls.paginator.paginate(queryset, params)

        cls.get_logger().debug(
            f"Listed {len(page.data)} transactions",
            extra={"user_id": user.pk, "has_more": page.has_more},
        )
        return page

    @classmethod
    def get_for_user(cls, user, transaction_id: str, account_ids: set | None = None) -> Transaction:
        """
        Fetch one of the user's transactions.

        Raises:
            NotFoundError: Unknown id, malformed id, or not the user's transaction
        """
        if account_ids is None:
            account_ids = cls.account_ids_for(user)

        transaction = None
        if validate_uuid(transaction_id):
            transaction = cls.visible_to(account_ids).filter(id=transaction_id).first()

        if transaction is None:
            raise NotFoundError(
                "Transaction not found",
                error_code="TRANSACTION_NOT_FOUND",
                details={"transaction_id": str(transaction_id)},
            )
        return transaction
