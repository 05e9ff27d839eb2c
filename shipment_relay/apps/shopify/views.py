"""
Views for the Shopify app
"""
import logging

from django.conf import settings

from shipment_relay.apps.core.serializers import CoordinatorValidationException
from shipment_relay.apps.core.views import WebhookAPIView
from shipment_relay.apps.inpost.clients import InPostAPIClient, readiness_from_tracking
from shipment_relay.apps.inpost.signals import shipment_label_created_signal, shipment_ready_for_fulfillment_signal
from shipment_relay.apps.shopify.authentication import ShopifyWebhookHMACAuthentication
from shipment_relay.apps.shopify.exceptions import InvalidShopifyWebhookPayloadAPIError
from shipment_relay.apps.shopify.resolver import order_name_from_fulfillment_name
from shipment_relay.apps.shopify.serializers import ShopifyFulfillmentWebhookSerializer

logger = logging.getLogger(__name__)


class FulfillmentCreatedWebhookView(WebhookAPIView):
    """
    Endpoint for Shopify's `fulfillments/create` webhook.

    When staff (or a shipping app) create a fulfillment carrying an InPost tracking number,
    the parcel's current carrier status decides what happens to the order: a parcel that only
    has a label holds the order, a parcel already in the network completes it.
    """
    authentication_classes = [ShopifyWebhookHMACAuthentication]

    def post(self, request):
        """Webhook entry point."""
        tag = type(self).__name__

        logger.info(f'[{tag}] Message received from Shopify with data: {request.data}')

        validator = ShopifyFulfillmentWebhookSerializer(data=request.data)
        try:
            validator.is_valid(raise_exception=True)
        except CoordinatorValidationException as exc:
            raise InvalidShopifyWebhookPayloadAPIError(detail=exc.detail) from exc

        fulfillment_id = validator.validated_data['id']
        order_name = order_name_from_fulfillment_name(validator.validated_data['name'])
        tracking_number = validator.validated_data['tracking_number']

        if not tracking_number:
            logger.info(f'[{tag}] Fulfillment [{fulfillment_id}] of order [{order_name}] has no tracking number.')
            return self.acknowledge(f'Fulfillment {fulfillment_id} has no tracking number.', processed=False)

        tracking = InPostAPIClient().get_tracking(tracking_number)
        if not tracking:
            logger.info(f'[{tag}] Tracking number [{tracking_number}] is unknown to InPost.')
            return self.acknowledge(f'Tracking number {tracking_number} is unknown to InPost.', processed=False)

        if tracking.get('status') in settings.INPOST_HOLD_STATUSES:
            processed = self.send_signal(shipment_label_created_signal, order_name=order_name)
            return self.acknowledge(f'Hold requested for order {order_name}.', processed=processed)

        readiness = readiness_from_tracking(tracking, fallback_tracking_number=tracking_number)
        if readiness.is_ready:
            processed = self.send_signal(
                shipment_ready_for_fulfillment_signal,
                order_name=order_name,
                tracking_number=readiness.tracking_number,
            )
            return self.acknowledge(f'Fulfillment requested for order {order_name}.', processed=processed)

        logger.info(f'[{tag}] Parcel [{tracking_number}] status [{tracking.get("status")}] needs no action.')
        return self.acknowledge(f'Status {tracking.get("status")} ignored.', processed=False)
