"""
App configuration for the Shopify app.
"""

from django.apps import AppConfig
from django.conf import ImproperlyConfigured, settings

from shipment_relay.apps.shopify.constants import EmptyCapabilitiesPolicy


class ShopifyConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'shipment_relay.apps.shopify'

    def ready(self):
        """Refuse to start with an empty-capabilities policy the orchestrator does not understand."""
        policy = settings.SHOPIFY_EMPTY_CAPABILITIES_POLICY
        try:
            EmptyCapabilitiesPolicy(policy)
        except ValueError as exc:
            allowed = ', '.join(member.value for member in EmptyCapabilitiesPolicy)
            raise ImproperlyConfigured(
                f'SHOPIFY_EMPTY_CAPABILITIES_POLICY is [{policy}], expected one of: {allowed}.'
            ) from exc
