"""
Core Application - Infrastructure & Base Classes

Generic, reusable building blocks shared by the domain apps (accounts,
transactions, coelsa, compliance). No business logic lives here.

Models (import from core.models):
    - BaseModel: Abstract model with timestamps (created_at, updated_at)

Model Mixins (import from core.model_mixins):
    - UUIDPrimaryKeyMixin: UUID as primary key
    - SoftDeleteMixin: Soft delete through a nullable deleted_at

Managers (import from core.managers):
    - SoftDeleteManager: Filter deleted records by default
    - SoftDeleteQuerySet: QuerySet with soft delete operations

Services (import from core.services):
    - BaseService: Base class for service layer
    - ServiceResult: Standard result wrapper for expected service outcomes

Exceptions (import from core.exceptions):
    - BaseApplicationError and subclasses, each mapped to an HTTP status
      by core.exception_handlers

Query building (import from core.querying):
    - build_where_clause, build_range_query, build_search_query,
      build_in_condition, build_not_in_condition, merge_conditions

Pagination (import from core.pagination):
    - CursorPaginator, CursorPaginationParams, CursorPage,
      CursorPaginationQuerySerializer

Note:
    Django models, managers and DRF-dependent modules are NOT imported here
    to avoid AppRegistryNotReady errors. Import them from their modules.
"""

# Services (no Django model dependencies)
from .services import BaseService, ServiceResult

# Exceptions (no Django dependencies)
from .exceptions import (
    AuthenticationError,
    BaseApplicationError,
    ConflictError,
    ExternalServiceError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)

__all__ = [
    "BaseService",
    "ServiceResult",
    "AuthenticationError",
    "BaseApplicationError",
    "ConflictError",
    "ExternalServiceError",
    "NotFoundError",
    "PermissionDeniedError",
    "ValidationError",
]
