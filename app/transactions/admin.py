"""
Transaction admin configuration.

Status is read-only here: it only moves through webhook-driven transitions.
"""

from django.contrib import admin

from transactions.models import Transaction


@admin.register(Transaction)
class TransactionAdmin(admin.ModelAdmin):
    """Read-mostly view of payment operations."""

    list_display = ["id", "coelsa_id", "type", "status", "amount", "currency", "created_at"]
    list_filter = ["status", "type", "currency", "country"]
    search_fields = ["id", "coelsa_id", "reverse_coelsa_id", "code", "reference"]
    readonly_fields = [
        "id",
        "status",
        "amount",
        "type",
        "reverse_coelsa_id",
        "created_at",
        "updated_at",
        "deleted_at",
    ]
    raw_id_fields = ["source_account", "target_account"]
    ordering = ["-created_at"]

    def get_queryset(self, request):
        return Transaction.all_objects.all()
