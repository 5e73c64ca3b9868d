import logging

from django.conf import settings
from django.core.exceptions import ObjectDoesNotExist
from django.db import IntegrityError
from django.http import Http404, JsonResponse
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

from .exceptions import StoreError

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = 'Cannot find given id'
INTERNAL_ERROR_MESSAGE = 'Internal server error'


def _view_name(context):
    view = context.get('view') if context else None
    return type(view).__name__ if view is not None else 'unknown'


def api_exception_handler(exc, context):
    """
    Single translation point from raised exceptions to HTTP responses.

    Domain errors carry their own status; ORM not-found and constraint errors
    become 404/400; DRF's own exceptions keep DRF's rendering; anything else
    is logged with its traceback and reported as a 500.
    """
    view_name = _view_name(context)

    if isinstance(exc, StoreError):
        logger.info("REJECTED — %s | %s: %s", view_name, type(exc).__name__, exc.message)
        set_rollback()
        return Response(exc.payload(), status=exc.status_code)

    if isinstance(exc, (Http404, ObjectDoesNotExist)):
        logger.info("NOT FOUND — %s", view_name)
        set_rollback()
        return Response({'message': NOT_FOUND_MESSAGE}, status=status.HTTP_404_NOT_FOUND)

    if isinstance(exc, IntegrityError):
        logger.warning("CONSTRAINT — %s | %s", view_name, exc)
        set_rollback()
        return Response({'message': str(exc)}, status=status.HTTP_400_BAD_REQUEST)

    response = exception_handler(exc, context)
    if response is not None:
        return response

    logger.exception("UNHANDLED — %s | %s", view_name, exc)
    set_rollback()
    message = str(exc) if settings.DEBUG else INTERNAL_ERROR_MESSAGE
    return Response({'message': message}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


def not_found(request, exception=None):
    """handler404: unmatched URLs (including malformed ids) get the same JSON body as the views."""
    logger.info("NOT FOUND — %s", request.path)
    return JsonResponse({'message': NOT_FOUND_MESSAGE}, status=status.HTTP_404_NOT_FOUND)
