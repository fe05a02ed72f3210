"""
API exception handlers.

This module provides custom exception handling for REST API responses.
Every failure is rendered as {"success": false, "error": {...}}.
"""

import logging
from typing import Any, Dict, Optional

from django.conf import settings
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.domain.exceptions import (
    DomainException,
    GeneratorNotFoundError,
    GeneratorPersistenceError,
    GeneratorValidationError,
    RouteDisabledError,
)
from core.metrics import errors_total

logger = logging.getLogger(__name__)

DOMAIN_STATUS_CODES = (
    (RouteDisabledError, status.HTTP_403_FORBIDDEN),
    (GeneratorNotFoundError, status.HTTP_404_NOT_FOUND),
    (GeneratorValidationError, status.HTTP_400_BAD_REQUEST),
    (GeneratorPersistenceError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def error_body(code: str, message: str, field: Optional[str] = None) -> Dict[str, Any]:
    """Build the error envelope."""
    error = {"code": code, "message": message}
    if field:
        error["field"] = field
    return {"success": False, "error": error}


def custom_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Custom exception handler for REST API."""
    trace_id = _get_trace_id(context)

    if isinstance(exc, DomainException):
        response = _handle_domain_exception(exc, context, trace_id)
    elif isinstance(exc, APIException):
        response = exception_handler(exc, context)
        code = exc.default_code.upper().replace("-", "_")
        detail = response.data.get("detail", exc.default_detail) if isinstance(
            response.data, dict
        ) else exc.default_detail
        response.data = error_body(code, str(detail))
    elif isinstance(exc, Http404):
        response = Response(
            error_body("NOT_FOUND", "Resource not found"),
            status=status.HTTP_404_NOT_FOUND,
        )
    else:
        return _handle_unexpected_exception(exc, context, trace_id)

    if trace_id:
        response["X-Trace-ID"] = trace_id
    return response


def domain_status_code(exc: DomainException) -> int:
    """
    HTTP status for a domain exception.

    With API_LEGACY_ERROR_STATUS enabled every domain failure is a 404,
    which is what older API clients expect.
    """
    if getattr(settings, "API_LEGACY_ERROR_STATUS", False):
        return status.HTTP_404_NOT_FOUND
    for exc_class, status_code in DOMAIN_STATUS_CODES:
        if isinstance(exc, exc_class):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def _get_trace_id(context: Dict[str, Any]) -> Optional[str]:
    """Extract trace ID from request context."""
    request = context.get("request")
    if not request:
        return None
    return getattr(request, "trace_id", getattr(request, "correlation_id", None))


def _endpoint(context: Dict[str, Any]) -> str:
    view = context.get("view")
    return getattr(view, "api_route", None) or "unknown"


def _handle_domain_exception(
    exc: DomainException, context: Dict[str, Any], trace_id: Optional[str]
) -> Response:
    """Handle domain-specific exceptions."""
    status_code = domain_status_code(exc)
    errors_total.labels(error_type=exc.code, endpoint=_endpoint(context)).inc()

    if isinstance(exc, GeneratorPersistenceError):
        logger.error("Domain exception: %s - %s", exc.code, exc.message, extra={"trace_id": trace_id})
    else:
        logger.warning(
            "Domain exception: %s - %s", exc.code, exc.message, extra={"trace_id": trace_id}
        )
    return Response(
        error_body(exc.code, exc.message, getattr(exc, "field", None)),
        status=status_code,
    )


def _handle_unexpected_exception(
    exc: Exception, context: Dict[str, Any], trace_id: Optional[str]
) -> Response:
    """Handle unexpected or untracked exceptions."""
    logger.error("Unexpected error: %s", exc, extra={"trace_id": trace_id}, exc_info=True)
    errors_total.labels(error_type=type(exc).__name__, endpoint=_endpoint(context)).inc()
    response = Response(
        error_body("INTERNAL_ERROR", "An internal error occurred"),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    if trace_id:
        response["X-Trace-ID"] = trace_id
    return response
