"""InPost app exceptions."""

from rest_framework.exceptions import APIException


class InvalidInPostWebhookPayloadAPIError(APIException):
    status_code = 400
    default_detail = 'Invalid InPost webhook payload'
    default_code = 'invalid_payload'
