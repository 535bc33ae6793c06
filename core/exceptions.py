import logging

from django.db import IntegrityError
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class Conflict(exceptions.APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Resource already exists."
    default_code = "conflict"


def _first_message(data):
    if isinstance(data, dict):
        if "detail" in data:
            return _first_message(data["detail"])
        for value in data.values():
            return _first_message(value)
        return ""
    if isinstance(data, (list, tuple)):
        return _first_message(data[0]) if data else ""
    return str(data)


def api_exception_handler(exc, context):
    """
    Render every API error as ``{"success": false, "message": ...}``.
    Validation failures also carry the per-field ``errors``.
    """
    if isinstance(exc, IntegrityError):
        logger.warning("Integrity error: %s", exc)
        exc = Conflict("Duplicate entry. Resource already exists.")

    response = exception_handler(exc, context)
    if response is None:
        view = context.get("view")
        logger.error(
            "Unhandled error in %s",
            view.__class__.__name__ if view else "view",
            exc_info=exc,
        )
        return Response(
            {"success": False, "message": "Internal Server Error"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, exceptions.ValidationError):
        response.data = {
            "success": False,
            "message": "Validation failed",
            "errors": response.data,
        }
    else:
        response.data = {"success": False, "message": _first_message(response.data)}
    return response
