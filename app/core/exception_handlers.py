"""
DRF exception handler for application errors.

Installed through settings:

    REST_FRAMEWORK = {
        "EXCEPTION_HANDLER": "core.exception_handlers.application_exception_handler",
    }

Any core.exceptions.BaseApplicationError raised from a view or service is
rendered as ``exc.to_dict()`` with ``exc.http_status``. Everything else goes
to DRF's default handler, which returns None for non-API exceptions so Django
turns them into a 500.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.exceptions import BaseApplicationError

if TYPE_CHECKING:
    from typing import Any


logger = logging.getLogger(__name__)


def application_exception_handler(exc: Exception, context: dict[str, Any]) -> Response | None:
    if isinstance(exc, BaseApplicationError):
        view = context.get("view")
        logger.info(
            f"{exc.__class__.__name__} in {view.__class__.__name__ if view else 'unknown view'}",
            extra={"error_code": exc.error_code, "status": exc.http_status},
        )
        return Response(exc.to_dict(), status=exc.http_status)

    return exception_handler(exc, context)
