"""
Middleware for Shipment Relay.
"""
import logging

from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def log_drf_exceptions(exc, context):
    """
    Log Django REST Framework exceptions raised by webhook and API views.

    Webhook senders only see the status code, so this log line is the record of why an event was rejected.
    """
    response = exception_handler(exc, context)

    status_code = response.status_code if response else None

    view_name = None
    if context and 'view' in context:
        view_type = type(context['view'])
        view_name = view_type.__module__ + '.' + view_type.__qualname__

    exception_type = type(exc).__module__ + '.' + type(exc).__qualname__ if exc else None

    method = path = data = None
    if context and 'request' in context:
        request = context['request']
        method = request.method
        path = request.get_full_path_info()
        data = request.data

    logger.warning(
        'DRF Exception in APIView: status code: [%s] on view: [%s] of '
        'type: [%s], via [%s] on path: [%s] with exception: [%s].',
        status_code, view_name, exception_type, method, path, exc,
    )
    logger.debug(
        'Payload for DRF Exception on view: [%s] with exception: [%s]: [%s].',
        view_name, exc, data
    )

    return response
