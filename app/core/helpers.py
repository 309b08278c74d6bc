"""
Helper functions for common infrastructure operations.

This module provides domain-agnostic utility functions for:
- UUID validation
- Constant-time secret comparison
- ISO 8601 timestamps for generated reports

Usage:
    from core.helpers import validate_uuid, secrets_match, utc_now_iso

    if validate_uuid(identifier):
        ...
"""

from __future__ import annotations

import hmac
import uuid
from datetime import timezone as dt_timezone

from django.utils import timezone


def validate_uuid(value: str) -> bool:
    """
    Check if string is a valid UUID.

    Example:
        is_valid = validate_uuid("550e8400-e29b-41d4-a716-446655440000")  # True
    """
    try:
        uuid.UUID(str(value))
        return True
    except (ValueError, TypeError, AttributeError):
        return False


def secrets_match(provided: str | None, expected: str | None) -> bool:
    """
    Compare two secrets in constant time.

    Missing or empty values never match, even if both sides are empty.
    """
    if not provided or not expected:
        return False
    return hmac.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))


def utc_now_iso() -> str:
    """Current time as ISO 8601 with millisecond precision and a Z suffix."""
    now = timezone.now().astimezone(dt_timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
