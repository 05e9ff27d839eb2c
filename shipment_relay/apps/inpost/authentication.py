"""
Authentication for webhooks sent by InPost.
"""

import hmac

from django.conf import settings
from rest_framework.authentication import BaseAuthentication
from rest_framework.exceptions import AuthenticationFailed

from shipment_relay.apps.inpost.constants import WEBHOOK_TOKEN_HEADER


class InPostWebhookTokenAuthentication(BaseAuthentication):
    """
    Compares a shared token header against settings.INPOST_WEBHOOK_TOKEN.

    ShipX does not sign its webhooks, so the token is configured into the webhook URL's
    headers on the InPost side. An empty setting disables the check.
    """

    def authenticate(self, request):
        expected = settings.INPOST_WEBHOOK_TOKEN
        if not expected:
            return None

        provided = request.headers.get(WEBHOOK_TOKEN_HEADER)
        if not provided:
            raise AuthenticationFailed("Missing webhook token")

        if not hmac.compare_digest(provided.encode(), expected.encode()):
            raise AuthenticationFailed("Invalid webhook token")

        return None, None
