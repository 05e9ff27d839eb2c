"""
shipment_relay URL Configuration.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/3.2/topics/http/urls/
"""

from django.http import JsonResponse
from django.urls import include, re_path
from rest_framework import status

from shipment_relay.apps.core import views as core_views
from shipment_relay.apps.inpost import urls as inpost_urls
from shipment_relay.apps.shopify import urls as shopify_urls

urlpatterns = [
    re_path(r'^health/?', core_views.health, name='health'),

    # Webhook receivers
    re_path(r'^inpost/', include(inpost_urls)),
    re_path(r'^shopify/', include(shopify_urls)),

    # Browser automated hits, this will limit 404s in logging
    re_path(r'^$', lambda r: JsonResponse(data=[
        "Welcome to Shipment Relay",
        "This is an API app that keeps Shopify orders in step with InPost shipments.",
    ], status=status.HTTP_200_OK, safe=False), name='root'),
]
