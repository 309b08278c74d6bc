"""
Core views providing infrastructure endpoints.

Only the health check lives here; business endpoints belong to their apps.
"""

from __future__ import annotations

import logging

from django.core.cache import cache
from django.db import DatabaseError, connection
from django.http import HttpRequest, JsonResponse

logger = logging.getLogger(__name__)


def health_check(request: HttpRequest) -> JsonResponse:
    """
    Liveness/readiness probe for load balancers and orchestration.

    The database is required; the cache is reported but does not fail
    the check.

    HTTP Status Codes:
        200: Database reachable
        503: Database unreachable

    Example Response:
        {"status": "healthy", "database": "connected", "cache": "connected"}
    """
    body = {"status": "healthy", "database": "connected", "cache": "connected"}
    status_code = 200

    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
    except DatabaseError:
        logger.exception("Health check: database unreachable")
        body["database"] = "disconnected"
        body["status"] = "unhealthy"
        status_code = 503

    cache.set("health_check", "ok", timeout=5)
    if cache.get("health_check") != "ok":
        body["cache"] = "disconnected"

    return JsonResponse(body, status=status_code)
