"""
Error kinds raised by the API views and their mapping to HTTP responses.

Views raise one of the exceptions below; inventory_exception_handler (wired in
REST_FRAMEWORK['EXCEPTION_HANDLER']) is the only place that turns them into
status codes and JSON bodies.
"""
import enum
import logging

from django.db import DatabaseError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger('backend.core')


class ErrorKind(enum.Enum):
    VALIDATION = 'validation'
    NOT_FOUND = 'not_found'
    BACKING_STORE = 'backing_store'


STATUS_BY_KIND = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.BACKING_STORE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class InventoryError(Exception):
    """Base class for errors that are reported to the client"""
    kind = None

    def __init__(self, message, details=None):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationFailed(InventoryError):
    """Request is missing a required upload or carries invalid fields"""
    kind = ErrorKind.VALIDATION


class NotFound(InventoryError):
    """Query matched zero rows"""
    kind = ErrorKind.NOT_FOUND


class BackingStoreError(InventoryError):
    """Database or upload storage failure. The message sent to the client is generic."""
    kind = ErrorKind.BACKING_STORE


def error_response(exc):
    """Build the response for an InventoryError"""
    if exc.kind is ErrorKind.NOT_FOUND:
        body = {'message': exc.message}
    else:
        body = {'error': exc.message}
        if exc.details:
            body['details'] = exc.details
    return Response(body, status=STATUS_BY_KIND[exc.kind])


def inventory_exception_handler(exc, context):
    request = context.get('request')
    where = getattr(request, 'path', 'unknown path')

    if isinstance(exc, BackingStoreError):
        cause = exc.__cause__ or exc
        logger.error(f"{exc.message} in {where}: {cause}", exc_info=cause)
        return error_response(exc)

    if isinstance(exc, InventoryError):
        return error_response(exc)

    if isinstance(exc, DatabaseError):
        logger.error(f"Database query error in {where}: {exc}", exc_info=exc)
        return Response({'error': 'Database query error'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    response = exception_handler(exc, context)
    if response is not None:
        response.data = reshape_framework_error(response)
    return response


def reshape_framework_error(response):
    """Bring DRF's own error bodies (parse errors, 405, 415, ...) into the {error}/{message} shape"""
    data = response.data
    if isinstance(data, dict) and set(data) == {'detail'}:
        text = str(data['detail'])
        if response.status_code == status.HTTP_404_NOT_FOUND:
            return {'message': text}
        return {'error': text}
    return {'error': 'Invalid request', 'details': data}
