"""
Custom QuerySet and Manager classes for soft-deleted models.

Usage:
    from core.managers import SoftDeleteManager

    class Transaction(SoftDeleteMixin, BaseModel):
        objects = SoftDeleteManager()   # Default: excludes deleted
        all_objects = models.Manager()  # Includes deleted

    Transaction.objects.all()           # Only live rows (deleted_at IS NULL)
    Transaction.objects.deleted()       # Only deleted rows
    Transaction.all_objects.all()       # Everything

Related:
    - core.model_mixins.SoftDeleteMixin: Model mixin for the deleted_at field
"""

from __future__ import annotations

from django.db import models
from django.utils import timezone


class SoftDeleteQuerySet(models.QuerySet):
    """
    QuerySet that provides soft delete operations.

    Methods:
        delete(): Soft delete (sets deleted_at)
        hard_delete(): Permanent delete
        restore(): Clear deleted_at on soft-deleted rows
        deleted(): Filter to only deleted records
        active(): Filter to only live records

    Note:
        The default filtering of deleted records happens in SoftDeleteManager,
        not in this QuerySet, so all_objects can share the same QuerySet.
    """

    def delete(self) -> tuple[int, dict[str, int]]:
        """
        Soft delete all live objects in the queryset.

        Returns:
            Tuple of (count, {model_label: count}) matching Django's delete()
        """
        count = self.filter(deleted_at__isnull=True).update(deleted_at=timezone.now())
        return count, {self.model._meta.label: count}

    def hard_delete(self) -> tuple[int, dict[str, int]]:
        """Permanently delete all objects in the queryset."""
        return super().delete()

    def restore(self) -> int:
        """
        Restore all soft-deleted objects in the queryset.

        Returns:
            Number of restored records
        """
        return self.filter(deleted_at__isnull=False).update(deleted_at=None)

    def deleted(self) -> SoftDeleteQuerySet:
        return self.filter(deleted_at__isnull=False)

    def active(self) -> SoftDeleteQuerySet:
        return self.filter(deleted_at__isnull=True)


class SoftDeleteManager(models.Manager):
    """
    Manager that filters out soft-deleted records by default.

    Always pair with a standard Manager (all_objects) for access to
    deleted rows.
    """

    def get_queryset(self) -> SoftDeleteQuerySet:
        """Return queryset restricted to deleted_at IS NULL."""
        return SoftDeleteQuerySet(self.model, using=self._db).filter(
            deleted_at__isnull=True
        )

    def deleted(self) -> SoftDeleteQuerySet:
        """Shortcut to get only deleted records."""
        return SoftDeleteQuerySet(self.model, using=self._db).filter(
            deleted_at__isnull=False
        )

    def with_deleted(self) -> SoftDeleteQuerySet:
        """Get queryset including deleted records."""
        return SoftDeleteQuerySet(self.model, using=self._db)
