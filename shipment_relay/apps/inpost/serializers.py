"""Serializers for InPost (ShipX) webhooks"""
from shipment_relay.apps.core import serializers


class InPostWebhookPayloadSerializer(serializers.CoordinatorSerializer):
    """
    The `payload` object of a ShipX webhook.
    """
    shipment_id = serializers.IntegerField()
    status = serializers.CharField(required=False, allow_blank=True, default='')
    tracking_number = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    reference = serializers.CharField(required=False, allow_null=True, allow_blank=True)


class InPostWebhookSerializer(serializers.CoordinatorSerializer):
    """
    Serializer for ShipX webhook input validation.
    """
    event = serializers.CharField()
    event_ts = serializers.CharField(required=False)
    organization_id = serializers.IntegerField(required=False)
    payload = InPostWebhookPayloadSerializer()
