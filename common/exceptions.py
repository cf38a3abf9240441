"""
Error taxonomy and the DRF exception handler for the project.

Views and services raise the stock DRF exceptions (``ValidationError``,
``PermissionDenied``, ``NotFound``, ``NotAuthenticated``) plus
``ServerError`` defined here.  ``envelope_exception_handler`` is installed as
``REST_FRAMEWORK["EXCEPTION_HANDLER"]`` and renders every failure, including
exceptions DRF does not know about, as the standard error envelope.
"""
import logging

from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.views import exception_handler, set_rollback

from .responses import error_envelope

logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = "The given data was invalid."
PASSTHROUGH_HEADERS = ("WWW-Authenticate", "Retry-After")


class ServerError(APIException):
    """A storage or I/O failure while serving the request."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Unexpected server error."
    default_code = "server_error"


def _first_text(detail):
    if isinstance(detail, dict):
        for value in detail.values():
            return _first_text(value)
        return ""
    if isinstance(detail, (list, tuple)):
        return _first_text(detail[0]) if detail else ""
    return str(detail)


def envelope_exception_handler(exc, context):
    # DRF normalises Django's Http404 / PermissionDenied and sets auth headers
    response = exception_handler(exc, context)
    if response is None:
        view = context.get("view")
        logger.error(
            "unhandled error in %s: %s",
            type(view).__name__ if view is not None else "request",
            exc,
            exc_info=(type(exc), exc, exc.__traceback__),
        )
        set_rollback()
        return error_envelope(str(exc) or ServerError.default_detail, status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(exc, ValidationError):
        errors = exc.detail if isinstance(exc.detail, dict) else {"non_field_errors": exc.detail}
        new = error_envelope(VALIDATION_MESSAGE, status.HTTP_422_UNPROCESSABLE_ENTITY, errors=errors)
    else:
        if response.status_code >= 500:
            logger.error("request failed: %s", exc)
        data = response.data
        message = _first_text(data.get("detail", data) if isinstance(data, dict) else data)
        new = error_envelope(message, response.status_code)

    for header in PASSTHROUGH_HEADERS:
        if response.has_header(header):
            new[header] = response[header]
    return new
