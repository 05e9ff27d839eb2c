"""
shopify app URLS
"""

from django.urls import path

from shipment_relay.apps.shopify.views import FulfillmentCreatedWebhookView

app_name = 'shopify'
urlpatterns = [
    path(
        'webhook/fulfillment-created/',
        FulfillmentCreatedWebhookView.as_view(),
        name='fulfillment_created_webhook'
    ),
]
