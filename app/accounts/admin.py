"""
Account admin configuration.
"""

from django.contrib import admin

from accounts.models import UserAccount


@admin.register(UserAccount)
class UserAccountAdmin(admin.ModelAdmin):
    """Admin for user accounts, including soft-deleted ones."""

    list_display = ["id", "user", "type", "status", "cvu", "balance", "currency", "created_at"]
    list_filter = ["type", "status", "currency"]
    search_fields = ["id", "cvu", "alias", "user__email"]
    readonly_fields = ["id", "created_at", "updated_at", "deleted_at"]
    ordering = ["-created_at"]

    def get_queryset(self, request):
        return UserAccount.all_objects.all()
