"""
App configuration for the InPost app.
"""

from django.apps import AppConfig


class InPostConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'shipment_relay.apps.inpost'
