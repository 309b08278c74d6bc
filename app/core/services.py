"""
Base service layer patterns for business logic encapsulation.

This module provides foundational patterns for the service layer:
- ServiceResult: Standard result wrapper for expected service outcomes
- BaseService: Base class with common service utilities

Service Layer Philosophy:
    Services encapsulate business logic separate from views and models.
    Views handle HTTP concerns, models handle data, services handle logic.

Pattern Comparison:
    - ServiceResult: Use for expected outcomes (webhook misses, business rules)
    - Exceptions: Use for failures the caller must not ignore (not found,
      bad credentials) and for unexpected errors

Usage:
    from core.services import BaseService, ServiceResult

    class CoelsaService(BaseService):
        def process_webhook(self, action, data) -> ServiceResult[dict]:
            ...
            return ServiceResult.success({"message": "Transfer completed processed"})

    # In view
    result = service.process_webhook(action, request.data)
    return Response(result.data, status=200)
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

from django.db import transaction

if TYPE_CHECKING:
    from collections.abc import Generator

T = TypeVar("T")


@dataclass
class ServiceResult(Generic[T]):
    """
    Standard result wrapper for service operations.

    Attributes:
        success: Whether the operation succeeded
        data: Result data

    Usage:
        result = service.process_webhook("transfer_completed", payload)
        if result:
            body = result.data
    """

    success: bool
    data: T | None = None

    @classmethod
    def success(cls, data: T) -> ServiceResult[T]:
        """
        Create a successful result.

        Example:
            return ServiceResult.success({"message": "Transfer failed processed"})
        """
        return cls(success=True, data=data)

    def __bool__(self) -> bool:
        return self.success


class BaseService:
    """
    Base class for service layer classes.

    Services are constructed with their configuration (credentials, feature
    switches) and hold no per-request state, so one instance can serve any
    number of requests.
    """

    @classmethod
    def get_logger(cls) -> logging.Logger:
        """
        Get logger for this service.

        Returns a logger named after the service class for easy filtering.

        Example:
            class ComplianceService(BaseService):
                def get_cvu_summary(self, ...):
                    self.get_logger().info("Generating CVU summary")
        """
        return logging.getLogger(f"{cls.__module__}.{cls.__name__}")

    @classmethod
    @contextmanager
    def atomic(cls) -> Generator[None, None, None]:
        """
        Run the enclosed operations in one database transaction.

        Rows are not locked; concurrent writers are last-write-wins.

        Example:
            with self.atomic():
                txn = Transaction.all_objects.filter(coelsa_id=coelsa_id).first()
                txn.confirm()
                txn.save(update_fields=["status", "updated_at"])
        """
        with transaction.atomic():
            yield
