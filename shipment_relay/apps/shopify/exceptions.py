"""Shopify app exceptions."""

from rest_framework.exceptions import APIException


class ShopifyTransportError(Exception):
    """
    A request to the Shopify Admin API could not be completed at the network level.

    Non-2xx responses are not transport errors; clients report those through their return values.
    """


class InvalidShopifyWebhookPayloadAPIError(APIException):
    status_code = 400
    default_detail = 'Invalid Shopify webhook payload'
    default_code = 'invalid_payload'
