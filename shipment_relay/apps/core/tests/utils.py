'''Utilities to help test Shipment Relay apps.'''

import base64
import hashlib
import hmac
import json
from unittest.mock import MagicMock

import responses
from django.apps import apps
from django.test import TestCase

from shipment_relay.apps.core.signal_helpers import CoordinatorSignal

example_signal = CoordinatorSignal()


class CoordinatorSignalReceiverTestCase(TestCase):
    '''
    Test a CoordinatorSignal receiver.

    Example:
        Use by subclassing like this::

            from django.test import override_settings

            from shipment_relay.apps.core.tests.utils import CoordinatorSignalReceiverTestCase

            @override_settings(
                RELAY_SIGNALS={
                    'shipment_relay.apps.core.tests.utils.example_signal': [
                        'shipment_relay.apps.your_app.signals.receiver_under_test',
                    ],
                }
            )
            class ReceiverUnderTestTests(CoordinatorSignalReceiverTestCase):

                mock_parameters =  {
                    'order_name': '#1001',
                }

                def test_config_matches_num_calls(self):
                    result, _ = self.fire_signal()
                    self.assertEqual(len(result), 1, 'Check 1 receiver is called')

    '''

    # Signal to fire.
    mock_signal = example_signal

    # Parameters to send with fired signal.
    mock_parameters = {
        'parameter_name': 'parameter_value',
    }

    def setUp(self):
        # Clear receiver connections from previous tests.
        self.mock_signal.receivers = []
        self.mock_signal.sender_receivers_cache.clear()

        # Remount signals after settings override.
        apps.get_app_config('core').ready()

    def tearDown(self):
        self.mock_signal.receivers = []
        self.mock_signal.sender_receivers_cache.clear()

    def fire_signal(self):
        '''Send mock_signal.'''
        with self.assertLogs() as logs:
            result = self.mock_signal.send_robust(
                sender=self.__class__,
                **self.mock_parameters
            )
        return (result, logs)


class RelayClientTestCase(TestCase):
    '''
    Testing class for methods of clients.py of a Shipment Relay app.
    '''

    @responses.activate
    def assertJSONClientResponse(
        self,
        *,
        uut,
        input_kwargs,
        expected_request=None,
        expected_headers=None,
        mock_method='POST',
        mock_url,
        mock_response=None,
        mock_status=200,
        expected_output=None
    ):
        '''
        Checks that uut produces expected_request and expected_output given input_kwargs and mock_response.

        Mocks any calls by requests to self.mock_url. Returns mock_response for those calls as JSON.

        Optionally, checks headers match self.expected_headers.

        Args:
            uut (callable): Unit under test. Calls an external API using the `requests` library.
            input_kwargs (dict): kwargs to provide uut.
            expected_request (dict): Expected request of uut to external API given input_kwargs. GET requests are
                matched on their query parameters, other requests on their JSON body.
            expected_headers (dict): Expected headers of uut to external API.
            mock_url (str): URL of external API to mock.
            mock_response (dict): Mock response external API should provide uut given expected_request. Will be
                converted to JSON.
            mock_status (int): HTTP Status Code
            mock_method (str): String of the Mocked Method (GET, POST, etc)
            expected_output (object): Expected return value of uut given mock_response.

        Returns:
            The output of uut, for further checks.
        '''

        is_get = mock_method == 'GET'

        # Use matcher for query params for GET requests:
        if is_get and expected_request:
            expected_match = [
                responses.matchers.query_param_matcher(expected_request)
            ]
        else:
            expected_match = []

        # Prepare external API's mock response:
        if mock_response is None:
            mock_response = {}
        responses.add(
            method=mock_method,
            url=mock_url,
            status=mock_status,
            json=mock_response,
            match=expected_match,
        )

        output = uut(**input_kwargs)

        request = responses.calls[-1].request

        # Perform checks:
        if expected_headers:
            self.assertGreaterEqual(
                request.headers.items(),
                expected_headers.items(),
                'Check external API called with expected headers'
            )
        if expected_request and not is_get:
            self.assertEqual(
                json.loads(request.body),
                expected_request,
                'Check external API called with expected input'
            )
        if expected_output is not None:
            self.assertEqual(
                output,
                expected_output,
                'Check client returns expected output'
            )

        return output


def shopify_hmac_header(body: bytes, secret: str) -> str:
    '''The X-Shopify-Hmac-Sha256 value Shopify would send for body.'''
    return base64.b64encode(hmac.new(secret.encode(), body, hashlib.sha256).digest()).decode()


def mock_receiver(**kwargs):
    pass  # pragma: no cover


class SendRobustSignalMock(MagicMock):
    """
    A mock send_robust call whose one receiver always reports success.
    """

    return_value = [
        (mock_receiver, True),
    ]
