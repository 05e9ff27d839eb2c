"""
API client for communication with the Shopify Admin REST API.
"""
import logging
from typing import Dict, List, Optional

from django.conf import settings
from requests.exceptions import RequestException

from shipment_relay.apps.core.clients import BaseSessionClient, urljoin_directory
from shipment_relay.apps.core.constants import HttpHeadersNames, MediaTypes
from shipment_relay.apps.shopify.exceptions import ShopifyTransportError

logger = logging.getLogger(__name__)


def is_success(response) -> bool:
    """Only 2xx counts; Shopify answers 202/422/423 for workflow states we must not mistake for success."""
    return 200 <= response.status_code < 300


class ShopifyAPIClient(BaseSessionClient):
    """
    API client for calls to the Shopify Admin REST API using a private app access token.

    Non-2xx answers are logged and reported through return values: `None` for reads and
    creations, `False` for plain state transitions. Network failures raise `ShopifyTransportError`.
    """

    def __init__(self):
        self.shop_domain = settings.SHOPIFY_SHOP_DOMAIN
        self.api_version = settings.SHOPIFY_API_VERSION
        super().__init__()

    @property
    def default_headers(self):
        return {
            **super().default_headers,
            'Content-Type': MediaTypes.JSON.value,
            'X-Shopify-Access-Token': settings.SHOPIFY_ACCESS_TOKEN,
        }

    @property
    def api_base_url(self):
        """
        Returns the versioned Admin API root for the configured shop.
        """
        return urljoin_directory(
            f'https://{self.shop_domain}', f'/admin/api/{self.api_version}/'
        )

    def _request(self, method, path, *, params=None, json=None, headers=None, log_context=''):
        """
        Send one request to the Admin API. No retries: callers are idempotent and the webhook sender redelivers.

        Returns:
            requests.Response: whatever Shopify answered, success or not.

        Raises:
            ShopifyTransportError: the request never got an answer.
        """
        url = urljoin_directory(self.api_base_url, path)
        try:
            response = self.session.request(
                method,
                url,
                params=params,
                json=json,
                headers=headers,
                timeout=self.normal_timeout,
            )
        except RequestException as exc:
            self.log_request_exception(f"[ShopifyAPIClient] {method} {url} {log_context}", logger, exc)
            raise ShopifyTransportError(f'{method} {url} failed: {exc}') from exc

        if is_success(response):
            logger.debug(f"[ShopifyAPIClient] {method} {url} returned [{response.status_code}] {log_context}")
        else:
            logger.warning(
                f"[ShopifyAPIClient] {method} {url} returned [{response.status_code}] "
                f"with body [{response.text}] {log_context}"
            )
        return response

    @staticmethod
    def _extract(response, key, default):
        """
        Pull `key` out of a successful JSON response, `None` if the response was not a success.

        A success whose body is not the expected JSON object yields `default`.
        """
        if not is_success(response):
            return None
        try:
            body = response.json()
        except ValueError:
            logger.warning(f"[ShopifyAPIClient] Response from {response.url} is not JSON, expected [{key}].")
            return default
        if not isinstance(body, dict):
            return default
        value = body.get(key, default)
        return value if value is not None else default

    def search_orders_by_name(self, order_name: str) -> Optional[List[Dict]]:
        """
        Find orders whose display name is `order_name`, in any status.

        Args:
            order_name (str): Display name including the leading `#`.

        Returns:
            list: Order objects (only `id` and `name`), in Shopify's order; `None` on a failed request.
        """
        response = self._request(
            'GET',
            'orders.json',
            params={'name': order_name, 'status': 'any', 'fields': 'id,name'},
            log_context=f'| order_name: {order_name}',
        )
        return self._extract(response, 'orders', [])

    def get_fulfillment_orders(self, order_id: int) -> Optional[List[Dict]]:
        """
        List the fulfillment orders of an order.
        """
        response = self._request(
            'GET',
            f'orders/{order_id}/fulfillment_orders.json',
            log_context=f'| order_id: {order_id}',
        )
        return self._extract(response, 'fulfillment_orders', [])

    def get_fulfillment_order(self, fulfillment_order_id: int) -> Optional[Dict]:
        """
        Read one fulfillment order, including its `supported_actions`.
        """
        response = self._request(
            'GET',
            f'fulfillment_orders/{fulfillment_order_id}.json',
            log_context=f'| fulfillment_order_id: {fulfillment_order_id}',
        )
        return self._extract(response, 'fulfillment_order', {})

    def hold_fulfillment_order(self, fulfillment_order_id: int, reason: str, reason_notes: str) -> bool:
        """
        Put a fulfillment order on hold.

        Args:
            fulfillment_order_id (int): Fulfillment order to hold.
            reason (str): One of Shopify's hold reasons, e.g. `other`.
            reason_notes (str): Free text shown to staff in the Shopify admin.

        Returns:
            bool: True when Shopify accepted the hold.
        """
        response = self._request(
            'POST',
            f'fulfillment_orders/{fulfillment_order_id}/hold.json',
            json={
                'fulfillment_hold': {
                    'reason': reason,
                    'reason_notes': reason_notes,
                    'notify_merchant': False,
                },
            },
            log_context=f'| fulfillment_order_id: {fulfillment_order_id}',
        )
        return is_success(response)

    def release_fulfillment_order_hold(self, fulfillment_order_id: int) -> bool:
        """
        Release the hold on a fulfillment order.

        Returns:
            bool: True when Shopify accepted the release.
        """
        response = self._request(
            'POST',
            f'fulfillment_orders/{fulfillment_order_id}/release_hold.json',
            json={},
            log_context=f'| fulfillment_order_id: {fulfillment_order_id}',
        )
        return is_success(response)

    def get_fulfillments(self, order_id: int) -> Optional[List[Dict]]:
        """
        List the fulfillments already recorded on an order.
        """
        response = self._request(
            'GET',
            f'orders/{order_id}/fulfillments.json',
            log_context=f'| order_id: {order_id}',
        )
        return self._extract(response, 'fulfillments', [])

    def create_fulfillment(
        self,
        fulfillment_order_id: int,
        tracking_number: str,
        tracking_company: str,
        notify_customer: bool,
        idempotency_key: str,
    ) -> Optional[Dict]:
        """
        Create a fulfillment covering a whole fulfillment order.

        Args:
            fulfillment_order_id (int): Fulfillment order being shipped.
            tracking_number (str): Carrier tracking number.
            tracking_company (str): Carrier name shown to the customer.
            notify_customer (bool): Whether Shopify emails the shipping confirmation.
            idempotency_key (str): Lets Shopify collapse a retried request into the first one.

        Returns:
            dict: The created fulfillment; `None` if Shopify refused.
        """
        response = self._request(
            'POST',
            'fulfillments.json',
            json={
                'fulfillment': {
                    'line_items_by_fulfillment_order': [
                        {'fulfillment_order_id': fulfillment_order_id},
                    ],
                    'notify_customer': notify_customer,
                    'tracking_info': {
                        'number': tracking_number,
                        'company': tracking_company,
                    },
                },
            },
            headers={HttpHeadersNames.IDEMPOTENCY_KEY.value: idempotency_key},
            log_context=f'| fulfillment_order_id: {fulfillment_order_id}, tracking_number: {tracking_number}',
        )
        return self._extract(response, 'fulfillment', {})

    def update_fulfillment_tracking(
        self,
        fulfillment_id: int,
        tracking_number: str,
        tracking_company: str,
        notify_customer: bool,
    ) -> Optional[Dict]:
        """
        Replace the tracking information of an existing fulfillment.

        Returns:
            dict: The updated fulfillment; `None` if Shopify refused.
        """
        response = self._request(
            'POST',
            f'fulfillments/{fulfillment_id}/update_tracking.json',
            json={
                'fulfillment': {
                    'notify_customer': notify_customer,
                    'tracking_info': {
                        'number': tracking_number,
                        'company': tracking_company,
                    },
                },
            },
            log_context=f'| fulfillment_id: {fulfillment_id}, tracking_number: {tracking_number}',
        )
        return self._extract(response, 'fulfillment', {})
