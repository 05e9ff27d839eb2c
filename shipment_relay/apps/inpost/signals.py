"""
InPost app signals.

Sent by the webhook views with `order_name` (and `tracking_number` for fulfillment);
receivers are configured in settings.RELAY_SIGNALS.
"""

from shipment_relay.apps.core.signal_helpers import CoordinatorSignal

shipment_label_created_signal = CoordinatorSignal()
shipment_ready_for_fulfillment_signal = CoordinatorSignal()
