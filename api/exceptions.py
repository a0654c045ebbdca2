"""
DRF exception handler that turns application exceptions into API responses.
"""
import logging
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler
from core.exceptions import (
    BaseApplicationException,
    ValidationError,
    NotFoundError,
    BusinessLogicError,
    StoreError,
)

logger = logging.getLogger(__name__)

STATUS_BY_EXCEPTION = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (BusinessLogicError, status.HTTP_409_CONFLICT),
    (StoreError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


def application_exception_handler(exc, context):
    """
    Let DRF handle its own exceptions, then map BaseApplicationException
    subclasses to {"detail", "code", "details"} responses.
    """
    response = exception_handler(exc, context)
    if response is not None:
        return response

    if not isinstance(exc, BaseApplicationException):
        return None

    status_code = status.HTTP_400_BAD_REQUEST
    for exc_class, code in STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_class):
            status_code = code
            break

    view = context.get('view')
    logger.warning(
        f"{type(exc).__name__} in {type(view).__name__ if view else 'unknown view'}: {exc.message}"
    )
    return Response(
        {'detail': exc.message, 'code': exc.code, 'details': exc.details},
        status=status_code
    )
