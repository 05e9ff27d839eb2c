"""
inpost app URLS
"""

from django.urls import path

from shipment_relay.apps.inpost.views import InPostWebhookView

app_name = 'inpost'
urlpatterns = [
    path('webhook/', InPostWebhookView.as_view(), name='webhook'),
]
