"""
Views for the InPost app
"""
import logging

from django.conf import settings

from shipment_relay.apps.core.serializers import CoordinatorValidationException
from shipment_relay.apps.core.views import WebhookAPIView
from shipment_relay.apps.inpost.authentication import InPostWebhookTokenAuthentication
from shipment_relay.apps.inpost.clients import InPostAPIClient
from shipment_relay.apps.inpost.constants import CONFIRMED_STATUS, InPostWebhookEvent
from shipment_relay.apps.inpost.exceptions import InvalidInPostWebhookPayloadAPIError
from shipment_relay.apps.inpost.serializers import InPostWebhookSerializer
from shipment_relay.apps.inpost.signals import shipment_label_created_signal, shipment_ready_for_fulfillment_signal

logger = logging.getLogger(__name__)


class InPostWebhookView(WebhookAPIView):
    """
    Endpoint for InPost ShipX webhook events.

    A created label puts the Shopify order on hold; a parcel adopted at the sorting center
    releases the hold and records the tracking number. Every other event is acknowledged and ignored.
    """
    authentication_classes = [InPostWebhookTokenAuthentication]

    def post(self, request):
        """Webhook entry point."""
        tag = type(self).__name__

        logger.info(f'[{tag}] Message received from InPost with data: {request.data}')

        validator = InPostWebhookSerializer(data=request.data)
        try:
            validator.is_valid(raise_exception=True)
        except CoordinatorValidationException as exc:
            raise InvalidInPostWebhookPayloadAPIError(detail=exc.detail) from exc

        event = validator.validated_data['event']
        payload = validator.validated_data['payload']
        shipment_id = payload['shipment_id']
        shipment_status = payload.get('status') or ''

        if event == InPostWebhookEvent.SHIPMENT_CONFIRMED and not shipment_status:
            shipment_status = CONFIRMED_STATUS
        elif event not in (InPostWebhookEvent.SHIPMENT_STATUS_CHANGED, InPostWebhookEvent.SHIPMENT_CONFIRMED):
            logger.info(f'[{tag}] Ignoring event [{event}] for shipment [{shipment_id}].')
            return self.acknowledge(f'Event {event} ignored.', processed=False)

        is_hold_status = shipment_status in settings.INPOST_HOLD_STATUSES
        is_fulfill_status = shipment_status in settings.INPOST_FULFILL_STATUSES
        if not (is_hold_status or is_fulfill_status):
            logger.info(f'[{tag}] Ignoring status [{shipment_status}] for shipment [{shipment_id}].')
            return self.acknowledge(f'Status {shipment_status} ignored.', processed=False)

        client = InPostAPIClient()
        order_name = (payload.get('reference') or '').strip() or client.resolve_order_reference(shipment_id)
        if not order_name:
            logger.warning(f'[{tag}] Shipment [{shipment_id}] does not reference an order.')
            return self.acknowledge(f'Shipment {shipment_id} does not reference an order.', processed=False)

        if is_hold_status:
            processed = self.send_signal(shipment_label_created_signal, order_name=order_name)
            return self.acknowledge(f'Hold requested for order {order_name}.', processed=processed)

        tracking_number = payload.get('tracking_number')
        readiness = client.check_readiness(tracking_number or shipment_id, fallback_tracking_number=tracking_number)
        if not readiness.is_ready or not readiness.tracking_number:
            logger.info(f'[{tag}] Shipment [{shipment_id}] of order [{order_name}] is not ready for fulfillment.')
            return self.acknowledge(f'Order {order_name} is not ready for fulfillment.', processed=False)

        processed = self.send_signal(
            shipment_ready_for_fulfillment_signal,
            order_name=order_name,
            tracking_number=readiness.tracking_number,
        )
        return self.acknowledge(f'Fulfillment requested for order {order_name}.', processed=processed)
