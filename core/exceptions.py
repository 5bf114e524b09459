"""
Error taxonomy shared by every resource.

ValidationError is DRF's own (400 with field-level messages). Authentication
and admin-role failures are raised by DRF's permission machinery as
NotAuthenticated (401) and PermissionDenied (403). The classes below cover the
remaining cases.
"""
import logging

from django.db import DatabaseError, IntegrityError
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = 'Server Error'


class NotFoundError(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Not found'
    default_code = 'not_found'


class ConflictError(APIException):
    """A uniqueness constraint (offer code, certificate id) would be violated."""
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'Duplicate value'
    default_code = 'conflict'

    def __init__(self, detail=None, field=None):
        super().__init__(detail)
        self.field = field


class StorageError(APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = SERVER_ERROR_MESSAGE
    default_code = 'storage_error'


class NotificationError(Exception):
    """Sending an operator email failed. Never reaches an HTTP caller."""


def api_exception_handler(exc, context):
    """DRF exception handler producing the public error shapes.

    - not found / conflict: {"message": ...}
    - storage and anything unexpected: 500 {"message": "Server Error"}
    - everything else keeps DRF's default body (validation errors stay field-level)
    """
    if isinstance(exc, IntegrityError):
        exc = ConflictError()
    elif isinstance(exc, DatabaseError):
        logger.exception('Database error while handling %s', _view_name(context))
        exc = StorageError()

    if isinstance(exc, NotFoundError):
        return Response({'message': str(exc.detail)}, status=exc.status_code)
    if isinstance(exc, ConflictError):
        body = {'message': str(exc.detail)}
        if exc.field:
            body['field'] = exc.field
        return Response(body, status=exc.status_code)
    if isinstance(exc, StorageError):
        return Response({'message': SERVER_ERROR_MESSAGE}, status=exc.status_code)

    response = exception_handler(exc, context)
    if response is None:
        logger.exception('Unhandled error in %s', _view_name(context), exc_info=exc)
        return Response({'message': SERVER_ERROR_MESSAGE}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return response


def _view_name(context):
    view = context.get('view') if context else None
    return view.__class__.__name__ if view is not None else 'unknown view'
