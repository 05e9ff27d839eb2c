"""
Shopify app signal receivers.
"""
import logging

from shipment_relay.apps.core.signal_helpers import log_receiver
from shipment_relay.apps.shopify.orchestrator import FulfillmentOrchestrator

logger = logging.getLogger(__name__)


@log_receiver(logger)
def shipment_label_created_put_order_on_hold(**kwargs):
    """
    Hold the order's fulfillment until the carrier picks the parcel up.
    """
    return FulfillmentOrchestrator().put_on_hold(kwargs['order_name'])


@log_receiver(logger)
def shipment_ready_for_fulfillment_mark_order_fulfilled(**kwargs):
    """
    Release the hold and record the carrier's tracking number on the order.
    """
    return FulfillmentOrchestrator().mark_fulfilled(kwargs['order_name'], kwargs['tracking_number'])
