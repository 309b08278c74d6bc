"""
Serializers for the transactions API.

Serializers:
    TransactionListQuerySerializer: Validates list filters and cursor params
    TransactionSerializer: Read-only transaction representation

Usage:
    query = TransactionListQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)
"""

from __future__ import annotations

from rest_framework import serializers

from core.pagination import CursorPaginationQuerySerializer

from transactions.models import Transaction
from transactions.states import TransactionStatus, TransactionType


class TransactionListQuerySerializer(CursorPaginationQuerySerializer):
    """
    Query parameters for GET /transactions/.

    All filters are optional; blank values are ignored.
    """

    sortable_fields = ("created_at", "updated_at", "amount")

    status = serializers.ChoiceField(choices=TransactionStatus.choices, required=False)
    type = serializers.ChoiceField(choices=TransactionType.choices, required=False)
    country = serializers.CharField(required=False, allow_blank=True, max_length=2)
    currency = serializers.CharField(required=False, allow_blank=True, max_length=3)
    start_date = serializers.DateTimeField(required=False)
    end_date = serializers.DateTimeField(required=False)
    min_amount = serializers.DecimalField(max_digits=18, decimal_places=2, required=False)
    max_amount = serializers.DecimalField(max_digits=18, decimal_places=2, required=False)
    search = serializers.CharField(required=False, allow_blank=True, max_length=100)

    def validate(self, attrs: dict) -> dict:
        min_amount = attrs.get("min_amount")
        max_amount = attrs.get("max_amount")
        if min_amount is not None and max_amount is not None and min_amount > max_amount:
            raise serializers.ValidationError(
                {"min_amount": ["Must be less than or equal to max_amount."]}
            )
        return attrs

    def filters(self) -> dict:
        """Validated filter values, without the pagination params."""
        pagination_keys = {"cursor", "take", "sort_by", "sort_order"}
        return {
            key: value
            for key, value in self.validated_data.items()
            if key not in pagination_keys
        }


class TransactionSerializer(serializers.ModelSerializer):
    """
    Read-only transaction representation.

    direction is relative to the caller: "out" when one of the caller's
    accounts is the source, otherwise "in". The caller's account ids are
    passed in context["account_ids"].
    """

    direction = serializers.SerializerMethodField()

    class Meta:
        model = Transaction
        fields = [
            "id",
            "coelsa_id",
            "type",
            "status",
            "amount",
            "currency",
            "country",
            "code",
            "reference",
            "reason",
            "source_account",
            "target_account",
            "direction",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_direction(self, obj: Transaction) -> str:
        account_ids = self.context.get("account_ids", set())
        return "out" if obj.source_account_id in account_ids else "in"
