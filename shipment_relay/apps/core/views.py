""" Core views. """
import logging

from django.http import JsonResponse
from edx_django_utils.monitoring import ignore_transaction
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from shipment_relay.apps.core.constants import Status
from shipment_relay.apps.core.exceptions import WebhookProcessingAPIError
from shipment_relay.apps.core.signal_helpers import (
    format_signal_results,
    signal_results_raised,
    signal_results_succeeded
)

logger = logging.getLogger(__name__)


def health(_):
    """Allows a load balancer to verify this service is up.

    The relay keeps no local data store, so being able to answer is the whole check.

    Returns:
        Response: 200 with JSON data indicating the service is available

    Example:
        >>> response = requests.get('https://shipment-relay.example.com/health')
        >>> response.status_code
        200
        >>> response.content
        '{"overall_status": "OK"}'
    """

    # Ignores health check in performance monitoring so as to not artifically inflate our response time metrics
    ignore_transaction()

    return JsonResponse({'overall_status': Status.OK})


class WebhookAPIView(APIView):
    """
    APIView for inbound platform webhooks that hand their work to CoordinatorSignal receivers.

    Receivers return False for a business failure (unknown order, refused transition). Those
    are acknowledged, since redelivering would not change the answer. A receiver that raises is
    a fault we cannot judge, so the sender is asked to redeliver.
    """
    http_method_names = ['post']
    permission_classes = [AllowAny]

    def send_signal(self, signal, **kwargs) -> bool:
        """
        Send `signal` robustly and judge the receivers' results.

        Returns:
            bool: True when every receiver reported success.

        Raises:
            WebhookProcessingAPIError: a receiver raised.
        """
        tag = type(self).__name__
        results = signal.send_robust(sender=self.__class__, **kwargs)
        logger.info(f'[{tag}] Signal results: {format_signal_results(results)}')

        if signal_results_raised(results):
            raise WebhookProcessingAPIError()

        return signal_results_succeeded(results)

    @staticmethod
    def acknowledge(message, processed):
        return Response({'message': message, 'processed': processed}, status=status.HTTP_200_OK)
