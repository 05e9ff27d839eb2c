"""Serializers for Shopify webhooks"""
from shipment_relay.apps.core import serializers


class ShopifyFulfillmentWebhookSerializer(serializers.CoordinatorSerializer):
    """
    Serializer for the `fulfillments/create` webhook input validation.
    """
    id = serializers.IntegerField()
    order_id = serializers.IntegerField(required=False)
    name = serializers.CharField()
    tracking_number = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    tracking_numbers = serializers.ListField(
        child=serializers.CharField(allow_blank=True), required=False, allow_null=True, default=list
    )

    def validate(self, attrs):
        """Fold the two tracking fields into one, preferring the singular one."""
        tracking_numbers = [number for number in attrs.get('tracking_numbers') or [] if number.strip()]
        attrs['tracking_number'] = (
            (attrs.get('tracking_number') or '').strip()
            or (tracking_numbers[0].strip() if tracking_numbers else '')
        )
        return attrs
