import logging

from django.db import DatabaseError
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class StorageError(APIException):
    """Persistence failure the API cannot recover from (connection loss, unexpected constraint)."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'Storage error, the operation was not completed.'
    default_code = 'storage_error'


def custom_exception_handler(exc, context):
    """
    DRF exception handler.

    ValidationError -> 400 and NotFound -> 404 are rendered by DRF itself;
    database failures are turned into StorageError (500) instead of leaking
    a bare server error page.
    """
    if isinstance(exc, DatabaseError):
        view = context.get('view')
        logger.exception(
            "Storage failure in %s", view.__class__.__name__ if view else 'unknown view',
            exc_info=exc,
        )
        exc = StorageError()

    return exception_handler(exc, context)
