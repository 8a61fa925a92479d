"""DRF exception handler for the settings API."""

from datetime import UTC, datetime
from typing import Any

from django.conf import settings

import structlog
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.constants import REQUEST_ID_HEADER
from core.logging.context import get_request_id

logger = structlog.get_logger(__name__)


def custom_exception_handler(exc: Exception, context: dict[str, Any]) -> Response:
    """Turn any exception raised by a view into a JSON response.

    DRF handles its own exceptions (plus Django's Http404 and
    PermissionDenied). Anything else becomes a 500 with the body
    ``{status, message, request_id, timestamp}``. The request ID is echoed
    in the X-Request-ID header.

    Args:
        exc: The exception that was raised.
        context: DRF context containing the view and request.

    Returns:
        The error response.
    """
    view = context.get("view")
    request = getattr(view, "request", None)
    request_id = get_request_id()

    response = exception_handler(exc, context)

    if response is None:
        response = Response(
            {
                "status": status.HTTP_500_INTERNAL_SERVER_ERROR,
                "message": "An internal server error occurred.",
                "request_id": request_id,
                "timestamp": datetime.now(UTC).isoformat(),
            },
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if request_id:
        response[REQUEST_ID_HEADER] = request_id

    log = logger.warning if response.status_code < 500 else logger.error
    log(
        "api_exception",
        error_type=type(exc).__name__,
        error=str(exc),
        method=getattr(request, "method", "unknown"),
        path=getattr(request, "path", "unknown"),
        status_code=response.status_code,
        exc_info=settings.DEBUG,
    )

    return response
