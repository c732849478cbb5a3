"""
DRF exception handler for the registry API.

Configured as ``REST_FRAMEWORK["EXCEPTION_HANDLER"]``. Renders registry errors,
DRF errors and unexpected failures as ``{"error": <message>}`` with the
matching status code.
"""

import logging

from django.db import OperationalError
from rest_framework import status
from rest_framework.exceptions import NotAuthenticated, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler, set_rollback

from registry.exceptions import InternalError, MissingToken, RegistryServiceError, ServiceBusy

logger = logging.getLogger(__name__)


def _error_response(error, headers=None):
    set_rollback()
    return Response({"error": error.message}, status=error.status_code, headers=headers)


def api_exception_handler(exc, context):
    """
    Unexpected exceptions are logged with their traceback and surfaced as a
    generic 500 so no internal detail reaches the client.
    """
    if isinstance(exc, NotAuthenticated):
        exc = MissingToken()

    if isinstance(exc, RegistryServiceError):
        headers = None
        if exc.status_code == status.HTTP_401_UNAUTHORIZED:
            headers = {"WWW-Authenticate": "Bearer"}
        return _error_response(exc, headers=headers)

    if isinstance(exc, OperationalError):
        # Pool exhaustion and dropped connections surface here
        logger.warning(f"Store unavailable while handling {_view_name(context)}: {exc}")
        return _error_response(ServiceBusy(), headers={"Retry-After": "5"})

    response = drf_exception_handler(exc, context)
    if response is None:
        logger.error(f"Unhandled error in {_view_name(context)}: {exc}", exc_info=exc)
        return _error_response(InternalError())

    if isinstance(exc, ValidationError):
        response.data = {"error": "Validation failed", "details": response.data}
    elif isinstance(response.data, dict) and "detail" in response.data:
        response.data = {"error": str(response.data["detail"])}
    else:
        response.data = {"error": response.data}
    return response


def _view_name(context):
    view = context.get("view") if context else None
    return type(view).__name__ if view is not None else "unknown view"
