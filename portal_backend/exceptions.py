"""
Shared error taxonomy for every API handler.

Handlers raise one of the exceptions below (or let DRF / Django raise their
own); ``portal_exception_handler`` turns all of them into a JSON body of the
form ``{"error": "<message>"}`` with the matching status code.
"""
import logging

from django.db import IntegrityError
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class Unauthenticated(exceptions.NotAuthenticated):
    default_detail = "Unauthorized"


class PermissionDenied(exceptions.PermissionDenied):
    default_detail = "Permission denied"


class ValidationFailed(exceptions.APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid request"
    default_code = "invalid"

    def __init__(self, detail=None, fields=None):
        super().__init__(detail)
        self.fields = fields


class NotFound(exceptions.NotFound):
    default_detail = "Not found"


class Internal(exceptions.APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal server error"
    default_code = "internal"


def _first_message(detail):
    if isinstance(detail, list):
        return _first_message(detail[0]) if detail else ""
    if isinstance(detail, dict):
        # field names travel separately in "fields"
        for value in detail.values():
            return _first_message(value)
        return ""
    return str(detail)


def portal_exception_handler(exc, context):
    view = context.get("view")
    view_name = view.__class__.__name__ if view is not None else "unknown"

    if isinstance(exc, IntegrityError):
        logger.warning("Integrity error in %s: %s", view_name, exc)
        return Response({"error": "Duplicate or conflicting record"}, status=status.HTTP_400_BAD_REQUEST)

    if isinstance(exc, Http404):
        exc = NotFound(str(exc) or None)

    response = exception_handler(exc, context)
    if response is None:
        logger.exception("Unhandled error in %s", view_name, exc_info=exc)
        return Response({"error": Internal.default_detail}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(exc, Internal):
        logger.error("Internal error in %s: %s", view_name, exc.detail)
        response.data = {"error": Internal.default_detail}
        return response

    body = {"error": _first_message(exc.detail) if isinstance(exc, exceptions.APIException) else str(exc)}
    if isinstance(exc, exceptions.ValidationError) and isinstance(exc.detail, dict):
        body["fields"] = exc.detail
    elif isinstance(exc, ValidationFailed) and exc.fields:
        body["fields"] = exc.fields
    response.data = body
    return response
