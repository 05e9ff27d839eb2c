"""Tests for the Shopify app views."""
import json
from unittest.mock import patch

import ddt
import requests_mock
from django.test import override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from shipment_relay.apps.core.tests.utils import SendRobustSignalMock, shopify_hmac_header

TRACKING_URL = 'https://inpost.testserver.com/v1/tracking/ABC123'

EXAMPLE_FULFILLMENT_WEBHOOK_PAYLOAD = {
    'id': 255858046,
    'order_id': 450789469,
    'name': '#1001.1',
    'status': 'success',
    'tracking_company': 'InPost',
    'tracking_number': 'ABC123',
    'tracking_numbers': ['ABC123'],
}


def tracking_body(tracking_status):
    return {
        'tracking_number': 'ABC123',
        'status': tracking_status,
        'tracking_details': [{'status': tracking_status}],
    }


class ShopifyWebhookTestMixin:
    """Posts signed webhook bodies the way Shopify does."""

    url = reverse('shopify:fulfillment_created_webhook')

    def post_webhook(self, payload, secret='shopify-test-secret', signature=None):
        body = json.dumps(payload).encode()
        headers = {}
        if signature is None:
            signature = shopify_hmac_header(body, secret)
        if signature:
            headers['HTTP_X_SHOPIFY_HMAC_SHA256'] = signature
        return self.client.post(self.url, data=body, content_type='application/json', **headers)


@ddt.ddt
@patch('shipment_relay.apps.shopify.views.shipment_ready_for_fulfillment_signal.send_robust',
       new_callable=SendRobustSignalMock)
@patch('shipment_relay.apps.shopify.views.shipment_label_created_signal.send_robust',
       new_callable=SendRobustSignalMock)
class FulfillmentCreatedWebhookViewTests(ShopifyWebhookTestMixin, APITestCase):
    """Tests of FulfillmentCreatedWebhookView routing."""

    @ddt.data('created', 'confirmed')
    def test_label_status_requests_hold(self, tracking_status, mock_hold_signal, mock_fulfill_signal):
        with requests_mock.Mocker() as mocker:
            mocker.get(TRACKING_URL, json=tracking_body(tracking_status))
            response = self.post_webhook(EXAMPLE_FULFILLMENT_WEBHOOK_PAYLOAD)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.json()['processed'])
        mock_hold_signal.assert_called_once()
        self.assertEqual(mock_hold_signal.call_args.kwargs['order_name'], '#1001')
        mock_fulfill_signal.assert_not_called()

    @ddt.data('adopted_at_sorting_center', 'out_for_delivery', 'delivered')
    def test_ready_status_requests_fulfillment(self, tracking_status, mock_hold_signal, mock_fulfill_signal):
        with requests_mock.Mocker() as mocker:
            mocker.get(TRACKING_URL, json=tracking_body(tracking_status))
            response = self.post_webhook(EXAMPLE_FULFILLMENT_WEBHOOK_PAYLOAD)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.json()['processed'])
        mock_fulfill_signal.assert_called_once()
        self.assertEqual(mock_fulfill_signal.call_args.kwargs['order_name'], '#1001')
        self.assertEqual(mock_fulfill_signal.call_args.kwargs['tracking_number'], 'ABC123')
        mock_hold_signal.assert_not_called()

    def test_other_status_ignored(self, mock_hold_signal, mock_fulfill_signal):
        with requests_mock.Mocker() as mocker:
            mocker.get(TRACKING_URL, json=tracking_body('offers_prepared'))
            response = self.post_webhook(EXAMPLE_FULFILLMENT_WEBHOOK_PAYLOAD)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(response.json()['processed'])
        mock_hold_signal.assert_not_called()
        mock_fulfill_signal.assert_not_called()

    def test_unknown_tracking_number_ignored(self, mock_hold_signal, mock_fulfill_signal):
        with requests_mock.Mocker() as mocker:
            mocker.get(TRACKING_URL, status_code=404, json={'error': 'resource_not_found'})
            response = self.post_webhook(EXAMPLE_FULFILLMENT_WEBHOOK_PAYLOAD)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(response.json()['processed'])
        mock_hold_signal.assert_not_called()
        mock_fulfill_signal.assert_not_called()

    def test_tracking_numbers_list_used(self, mock_hold_signal, mock_fulfill_signal):
        payload = {**EXAMPLE_FULFILLMENT_WEBHOOK_PAYLOAD, 'tracking_number': None}

        with requests_mock.Mocker() as mocker:
            mocker.get(TRACKING_URL, json=tracking_body('delivered'))
            response = self.post_webhook(payload)

        self.assertTrue(response.json()['processed'])
        mock_fulfill_signal.assert_called_once()

    def test_no_tracking_number_ignored(self, mock_hold_signal, mock_fulfill_signal):
        payload = {**EXAMPLE_FULFILLMENT_WEBHOOK_PAYLOAD, 'tracking_number': None, 'tracking_numbers': []}

        with requests_mock.Mocker() as mocker:
            response = self.post_webhook(payload)
            self.assertFalse(mocker.called)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(response.json()['processed'])
        mock_hold_signal.assert_not_called()
        mock_fulfill_signal.assert_not_called()

    @ddt.data(
        {},
        {'id': 'not-a-number', 'order_id': 1, 'name': '#1001.1'},
        {'id': 1, 'order_id': 1},
    )
    def test_invalid_payload(self, payload, mock_hold_signal, mock_fulfill_signal):
        response = self.post_webhook(payload)

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        mock_hold_signal.assert_not_called()
        mock_fulfill_signal.assert_not_called()

    def test_missing_signature(self, mock_hold_signal, mock_fulfill_signal):
        response = self.post_webhook(EXAMPLE_FULFILLMENT_WEBHOOK_PAYLOAD, signature='')

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        mock_hold_signal.assert_not_called()

    def test_wrong_secret(self, mock_hold_signal, mock_fulfill_signal):
        response = self.post_webhook(EXAMPLE_FULFILLMENT_WEBHOOK_PAYLOAD, secret='someone-else')

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        mock_hold_signal.assert_not_called()

    @override_settings(SHOPIFY_WEBHOOK_SECRET='rotated-secret')
    def test_secret_from_settings(self, mock_hold_signal, mock_fulfill_signal):
        with requests_mock.Mocker() as mocker:
            mocker.get(TRACKING_URL, json=tracking_body('created'))
            response = self.post_webhook(EXAMPLE_FULFILLMENT_WEBHOOK_PAYLOAD, secret='rotated-secret')

        self.assertEqual(response.status_code, status.HTTP_200_OK)


@patch('shipment_relay.apps.shopify.signals.FulfillmentOrchestrator')
class FulfillmentCreatedWebhookOutcomeTests(ShopifyWebhookTestMixin, APITestCase):
    """Tests of how receiver outcomes reach Shopify."""

    def test_business_failure_acknowledged(self, mock_orchestrator_class):
        mock_orchestrator_class.return_value.mark_fulfilled.return_value = False

        with requests_mock.Mocker() as mocker:
            mocker.get(TRACKING_URL, json=tracking_body('delivered'))
            response = self.post_webhook(EXAMPLE_FULFILLMENT_WEBHOOK_PAYLOAD)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(response.json()['processed'])
        mock_orchestrator_class.return_value.mark_fulfilled.assert_called_once_with('#1001', 'ABC123')

    def test_receiver_exception_asks_for_redelivery(self, mock_orchestrator_class):
        mock_orchestrator_class.return_value.put_on_hold.side_effect = RuntimeError('unexpected')

        with requests_mock.Mocker() as mocker:
            mocker.get(TRACKING_URL, json=tracking_body('created'))
            response = self.post_webhook(EXAMPLE_FULFILLMENT_WEBHOOK_PAYLOAD)

        self.assertEqual(response.status_code, status.HTTP_502_BAD_GATEWAY)
