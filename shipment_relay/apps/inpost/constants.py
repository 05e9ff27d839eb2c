""" Constants for the InPost app. """


class InPostWebhookEvent:
    """ShipX webhook event names the relay reacts to."""

    SHIPMENT_STATUS_CHANGED = 'shipment_status_changed'
    SHIPMENT_CONFIRMED = 'shipment_confirmed'
    """Sent once the label is bought; carries no status of its own."""


CONFIRMED_STATUS = 'confirmed'

WEBHOOK_TOKEN_HEADER = 'X-InPost-Webhook-Token'
