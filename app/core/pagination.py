"""
Cursor-based forward pagination for list endpoints.

The cursor is the key of the last item on the previous page. The next page
starts strictly after that row in the requested ordering (exclusive start).
One extra row is fetched to learn whether more data exists.

Cursor-based pagination advantages:
- Stable results during concurrent inserts
- No offset calculation or COUNT(*) needed

Known limitation:
    Only forward traversal is supported. previous_cursor is reported for
    symmetry with the response shape but has_previous is always False.

Usage:
    from core.pagination import CursorPaginator, CursorPaginationQuerySerializer

    query = TransactionCursorQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)

    page = CursorPaginator().paginate(queryset, query.to_params())
    return Response(page.to_dict(lambda items: Serializer(items, many=True).data))
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db.models import Q, QuerySet
from rest_framework import serializers

T = TypeVar("T")

SORT_ORDERS = ("asc", "desc")

DEFAULT_TAKE = 20
MAX_TAKE = 100


@dataclass(frozen=True)
class CursorPaginationParams:
    """
    Validated pagination input.

    Attributes:
        take: Page size, a positive integer
        cursor: Key of the last item already seen (None for the first page)
        sort_by: Field to order by (None = paginator default, created_at)
        sort_order: "asc" or "desc" (None = "desc")
    """

    take: int
    cursor: Any = None
    sort_by: str | None = None
    sort_order: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.take, bool) or not isinstance(self.take, int) or self.take < 1:
            raise ValueError(f"take must be a positive integer, got {self.take!r}")
        if self.sort_order is not None and self.sort_order not in SORT_ORDERS:
            raise ValueError(f"sort_order must be 'asc' or 'desc', got {self.sort_order!r}")


@dataclass
class CursorPage(Generic[T]):
    """One page of results plus the cursors needed to continue."""

    data: list[T] = field(default_factory=list)
    next_cursor: Any = None
    previous_cursor: Any = None
    has_more: bool = False
    has_previous: bool = False

    def to_dict(self, serialize: Callable[[list[T]], Any] | None = None) -> dict[str, Any]:
        """
        Render the page for an API response.

        Args:
            serialize: Optional callable turning the item list into
                JSON-ready data (typically a many=True serializer)
        """
        return {
            "data": serialize(self.data) if serialize else self.data,
            "nextCursor": _cursor_str(self.next_cursor),
            "previousCursor": _cursor_str(self.previous_cursor),
            "hasMore": self.has_more,
            "hasPrevious": self.has_previous,
        }


def _cursor_str(cursor: Any) -> str | None:
    return None if cursor is None else str(cursor)


class CursorPaginator:
    """
    Generic forward paginator over any ordered, uniquely keyed queryset.

    Args:
        default_sort_by: Ordering field used when the request names none
        key_field: Unique field whose value serves as the cursor
    """

    def __init__(self, default_sort_by: str = "created_at", key_field: str = "id"):
        self.default_sort_by = default_sort_by
        self.key_field = key_field

    def build_queryset(self, queryset: QuerySet, params: CursorPaginationParams) -> QuerySet:
        """
        Order, position after the cursor, and over-fetch take + 1 rows.

        The key field is appended to the ordering as a tie-breaker so rows
        sharing a sort value keep a total order. A cursor that does not
        resolve to a row of this queryset yields an empty result.
        """
        sort_by = params.sort_by or self.default_sort_by
        descending = (params.sort_order or "desc") == "desc"
        prefix = "-" if descending else ""

        ordering = [f"{prefix}{sort_by}"]
        if sort_by != self.key_field:
            ordering.append(f"{prefix}{self.key_field}")
        queryset = queryset.order_by(*ordering)

        if params.cursor is not None:
            try:
                anchor = (
                    queryset.filter(**{self.key_field: params.cursor})
                    .values(sort_by, self.key_field)
                    .first()
                )
            except (DjangoValidationError, ValueError, TypeError):
                anchor = None

            if anchor is None:
                return queryset.none()

            lookup = "lt" if descending else "gt"
            after = Q(**{f"{sort_by}__{lookup}": anchor[sort_by]})
            if sort_by != self.key_field:
                after |= Q(
                    **{
                        sort_by: anchor[sort_by],
                        f"{self.key_field}__{lookup}": anchor[self.key_field],
                    }
                )
            queryset = queryset.filter(after)

        return queryset[: params.take + 1]

    def build_result(self, items: Sequence[T], take: int) -> CursorPage[T]:
        """
        Turn an over-fetched slice into a page.

        Args:
            items: Up to take + 1 rows in display order
            take: Requested page size
        """
        items = list(items)
        has_more = len(items) > take
        page_items = items[:take] if has_more else items

        return CursorPage(
            data=page_items,
            next_cursor=self._key(page_items[-1]) if has_more and page_items else None,
            previous_cursor=self._key(page_items[0]) if page_items else None,
            has_more=has_more,
            has_previous=False,
        )

    def paginate(self, queryset: QuerySet, params: CursorPaginationParams) -> CursorPage:
        return self.build_result(self.build_queryset(queryset, params), params.take)

    def _key(self, item: Any) -> Any:
        if isinstance(item, Mapping):
            return item[self.key_field]
        return getattr(item, self.key_field)


class CursorPaginationQuerySerializer(serializers.Serializer):
    """
    Validates cursor pagination query parameters.

    Subclasses restrict sort_by by setting sortable_fields.

    Query parameters:
        cursor: Key of the last item of the previous page
        take: Page size (1-100, default 20)
        sort_by: Field to order by
        sort_order: asc or desc
    """

    sortable_fields: tuple[str, ...] = ("created_at",)

    cursor = serializers.CharField(required=False, allow_blank=False)
    take = serializers.IntegerField(
        required=False,
        min_value=1,
        max_value=MAX_TAKE,
        default=DEFAULT_TAKE,
    )
    sort_by = serializers.CharField(required=False)
    sort_order = serializers.ChoiceField(choices=SORT_ORDERS, required=False)

    def validate_sort_by(self, value: str) -> str:
        if value not in self.sortable_fields:
            raise serializers.ValidationError(
                f"Cannot sort by '{value}'. Allowed: {', '.join(self.sortable_fields)}"
            )
        return value

    def to_params(self) -> CursorPaginationParams:
        data = self.validated_data
        return CursorPaginationParams(
            take=data.get("take", DEFAULT_TAKE),
            cursor=data.get("cursor"),
            sort_by=data.get("sort_by"),
            sort_order=data.get("sort_order"),
        )
