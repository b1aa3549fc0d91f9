"""Maps domain errors to HTTP responses.

Registered as REST_FRAMEWORK["EXCEPTION_HANDLER"]. Each error code maps to
exactly one status. Invalid ids and missing resources answer in plain text,
everything else as JSON with the error code.
"""

import logging

from django.http import HttpResponse
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from events.domain.errors import DomainError, ErrorCode, PayloadValidationError

logger = logging.getLogger(__name__)

ERROR_STATUS: dict[ErrorCode, int] = {
    ErrorCode.INVALID_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.VALIDATION_FAILED: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.TICKET_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.EVENT_NAME_CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.TICKET_CODE_CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.EVENT_ALREADY_HAPPENED: status.HTTP_403_FORBIDDEN,
    ErrorCode.TICKET_ALREADY_USED: status.HTTP_403_FORBIDDEN,
}

PLAIN_TEXT_CODES = frozenset(
    {
        ErrorCode.INVALID_ID,
        ErrorCode.EVENT_NOT_FOUND,
        ErrorCode.TICKET_NOT_FOUND,
    }
)


def domain_error_response(error: DomainError) -> HttpResponse:
    status_code = ERROR_STATUS[error.code]
    if error.code in PLAIN_TEXT_CODES:
        return HttpResponse(error.message, status=status_code, content_type="text/plain; charset=utf-8")

    body = {"code": error.code.value, "message": error.message}
    if isinstance(error, PayloadValidationError):
        body["errors"] = error.errors
    return Response(body, status=status_code)


def domain_exception_handler(exc, context):
    """Turn DomainError into its HTTP response, defer everything else to DRF."""
    if isinstance(exc, DomainError):
        view = context.get("view")
        logger.debug("%s answered %s", type(view).__name__, exc)
        return domain_error_response(exc)
    return exception_handler(exc, context)
