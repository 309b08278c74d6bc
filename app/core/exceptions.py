"""
Base exception classes for application-wide error handling.

Exception Hierarchy:
    BaseApplicationError (base)
    ├── ValidationError - Input validation failures
    ├── AuthenticationError - Missing or wrong credentials (Unauthorized)
    ├── PermissionDeniedError - Authorization failures
    ├── NotFoundError - Resource not found
    ├── ConflictError - State conflicts (duplicates, invalid transitions)
    └── ExternalServiceError - Payment rail or other third-party failures

Every class carries the HTTP status it maps to. The DRF exception handler in
core.exception_handlers renders any of them as ``to_dict()`` with that status.

Usage:
    from core.exceptions import NotFoundError

    raise NotFoundError("Operation not found", details={"identifier": op_id})

Note:
    These exceptions are for domain/business logic errors raised from the
    service layer. DRF handles API-layer exceptions (parsing, JWT auth).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any


class BaseApplicationError(Exception):
    """
    Base exception for all application-specific errors.

    Attributes:
        message: Human-readable error description
        error_code: Machine-readable code for client-side handling
        details: Additional error context (field errors, identifiers, etc.)
        http_status: Status code used when rendered by the API layer
    """

    default_error_code: str = "APPLICATION_ERROR"
    http_status: int = 400

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        Example:
            {
                "error": "Operation not found",
                "error_code": "OPERATION_NOT_FOUND",
                "details": {"identifier": "abc"}
            }
        """
        result: dict[str, Any] = {
            "error": self.message,
            "error_code": self.error_code,
        }
        if self.details:
            result["details"] = self.details
        return result

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code!r}, "
            f"details={self.details!r})"
        )


class ValidationError(BaseApplicationError):
    """
    Raised when input validation fails in the service layer.

    For request validation, use DRF serializers instead.
    """

    default_error_code: str = "VALIDATION_ERROR"
    http_status: int = 400


class AuthenticationError(BaseApplicationError):
    """
    Raised when a caller presents missing or wrong credentials.

    Used by header-secret endpoints (compliance extracts) that do not go
    through DRF's authentication classes.

    Example:
        if not service.validate_summary_auth(passphrase, secret):
            raise AuthenticationError("Invalid credentials")
    """

    default_error_code: str = "UNAUTHORIZED"
    http_status: int = 401


class PermissionDeniedError(BaseApplicationError):
    """Raised when an authenticated caller lacks permission for an operation."""

    default_error_code: str = "PERMISSION_DENIED"
    http_status: int = 403


class NotFoundError(BaseApplicationError):
    """
    Raised when a requested resource is not found.

    Use for single-resource lookups where existence is expected. List
    queries return empty results instead.
    """

    default_error_code: str = "NOT_FOUND"
    http_status: int = 404


class ConflictError(BaseApplicationError):
    """
    Raised when an operation conflicts with current resource state.

    Example:
        raise ConflictError(
            "Cannot reverse transaction in error status",
            error_code="INVALID_STATE_TRANSITION",
            details={"current_status": "error", "action": "reverse"},
        )
    """

    default_error_code: str = "CONFLICT"
    http_status: int = 409


class ExternalServiceError(BaseApplicationError):
    """
    Raised when an external service call fails.

    Log the original error for debugging but don't expose internal
    details to clients in production.
    """

    default_error_code: str = "EXTERNAL_SERVICE_ERROR"
    http_status: int = 502
