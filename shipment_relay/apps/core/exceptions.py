"""Exceptions shared by the webhook views."""

from rest_framework.exceptions import APIException


class WebhookProcessingAPIError(APIException):
    status_code = 502
    default_detail = 'The event could not be processed, please redeliver it.'
    default_code = 'webhook_processing_error'
