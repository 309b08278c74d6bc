"""
Query condition builders for list endpoints.

Pure functions with no I/O. They turn optional request filters into
conditions that list services hand to the ORM.

Two shapes are produced:
    - Operator dicts ({"gte": 10}, {"in": [...]}, {"not_in": [...]}) that do
      not know which field they apply to. condition_to_q() binds one to a field.
    - Django Q objects for conditions that span several fields (search, merge).

Empty inputs always mean "no constraint": they produce None or an empty Q(),
never a condition that matches against an empty set.

Usage:
    from core.querying import (
        build_range_query,
        build_search_query,
        build_where_clause,
        condition_to_q,
        merge_conditions,
    )

    where = build_where_clause(
        {"status": status, "country": country},
        {"country": lambda value: {"country": value.lower()}},
    )
    condition = merge_conditions(
        where,
        condition_to_q("amount", build_range_query(min_amount, max_amount)),
        build_search_query(search, ["code", "reference"]) if search else None,
    )
    Transaction.objects.filter(condition)
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Mapping
from functools import reduce
from typing import Any, Union

from django.db.models import Q

FieldMapping = Mapping[str, Union[str, Callable[[Any], Mapping[str, Any]]]]

# Operator keys understood by condition_to_q(), mapped to ORM lookups.
LOOKUPS = {
    "gte": "gte",
    "lte": "lte",
    "gt": "gt",
    "lt": "lt",
    "in": "in",
    "icontains": "icontains",
}


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


def build_where_clause(
    filters: Mapping[str, Any],
    field_mapping: FieldMapping | None = None,
) -> dict[str, Any]:
    """
    Build a flat filter mapping from optional request filters.

    Keys whose value is None or "" are dropped. Each remaining key is either
    renamed (string mapping), expanded (callable mapping, whose returned
    mapping is merged in) or kept as is.

    Args:
        filters: Raw filter values keyed by filter name
        field_mapping: Optional per-key rename or value transform

    Returns:
        Dict suitable for QuerySet.filter(**where)

    Example:
        build_where_clause(
            {"status": "pending", "type": None, "search": ""},
            {"status": "status__iexact"},
        )
        # {"status__iexact": "pending"}
    """
    field_mapping = field_mapping or {}
    where: dict[str, Any] = {}

    for key, value in filters.items():
        if _is_blank(value):
            continue

        mapped = field_mapping.get(key, key)
        if callable(mapped):
            where.update(mapped(value))
        else:
            where[mapped] = value

    return where


def build_range_query(min_value: Any = None, max_value: Any = None) -> dict[str, Any] | None:
    """
    Build an inclusive range condition.

    Only present bounds are included. Zero is a present bound.

    Returns:
        {"gte": min, "lte": max} (either key optional), or None when
        neither bound is given
    """
    range_condition: dict[str, Any] = {}
    if min_value is not None:
        range_condition["gte"] = min_value
    if max_value is not None:
        range_condition["lte"] = max_value
    return range_condition or None


def build_search_query(term: str, fields: Iterable[str]) -> Q:
    """
    Case-insensitive substring match across several fields, ORed together.

    Example:
        build_search_query("abc", ["code", "reference"])
        # Q(code__icontains="abc") | Q(reference__icontains="abc")
    """
    conditions = [Q(**{f"{field}__icontains": term}) for field in fields]
    if not conditions:
        return Q()
    return reduce(operator.or_, conditions)


def build_like_condition(value: str) -> dict[str, str]:
    """Case-insensitive containment condition for a single field."""
    return {"icontains": value}


def build_in_condition(values: Iterable[Any] | None) -> dict[str, list[Any]] | None:
    """
    Membership condition.

    Returns None for an empty or missing list so callers never filter
    against an empty set (which would reject every row).
    """
    values = list(values or [])
    return {"in": values} if values else None


def build_not_in_condition(values: Iterable[Any] | None) -> dict[str, list[Any]] | None:
    """
    Non-membership condition.

    Returns None for an empty or missing list so callers never exclude
    against an empty set.
    """
    values = list(values or [])
    return {"not_in": values} if values else None


def condition_to_q(field: str, condition: Mapping[str, Any] | None) -> Q:
    """
    Bind an operator dict to a model field.

    Example:
        condition_to_q("amount", {"gte": 10, "lte": 50})
        # Q(amount__gte=10, amount__lte=50)

        condition_to_q("type", {"not_in": ["cashout_coelsa"]})
        # ~Q(type__in=["cashout_coelsa"])

    Raises:
        ValueError: If the dict holds an operator this module does not produce
    """
    if not condition:
        return Q()

    q = Q()
    for op, value in condition.items():
        if op == "not_in":
            q &= ~Q(**{f"{field}__in": value})
        elif op in LOOKUPS:
            q &= Q(**{f"{field}__{LOOKUPS[op]}": value})
        else:
            raise ValueError(f"Unsupported condition operator: {op}")
    return q


def merge_conditions(*conditions: Q | Mapping[str, Any] | None) -> Q:
    """
    AND together every non-empty condition.

    Accepts Q objects and flat filter dicts (as built by build_where_clause).
    None and empty inputs are dropped.

    Returns:
        The combined Q, or an empty Q() (no constraint) if nothing remains
    """
    parts: list[Q] = []
    for condition in conditions:
        if not condition:
            continue
        parts.append(condition if isinstance(condition, Q) else Q(**condition))

    if not parts:
        return Q()
    return reduce(operator.and_, parts)
