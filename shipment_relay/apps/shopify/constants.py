""" Constants for the Shopify app. """
from enum import Enum

ORDER_NAME_PREFIX = '#'
"""Shopify order names are displayed, and searched, with this prefix."""


class OperationOutcome(Enum):
    """Result of one step of an orchestration against Shopify."""

    SUCCESS = 'success'
    FAILED = 'failed'
    UNSUPPORTED = 'unsupported'
    """The fulfillment order does not currently allow the operation."""

    SKIPPED = 'skipped'
    """Nothing needed doing."""


class FulfillmentOrderAction:
    """Names Shopify uses in a fulfillment order's `supported_actions`."""

    HOLD = 'hold'
    RELEASE_HOLD = 'release_hold'
    CREATE_FULFILLMENT = 'create_fulfillment'
    FULFILL = 'fulfill'


FULFILL_ACTIONS = frozenset({
    FulfillmentOrderAction.CREATE_FULFILLMENT,
    FulfillmentOrderAction.FULFILL,
})
"""Either of these in the capability set means a fulfillment may be created."""


class EmptyCapabilitiesPolicy(Enum):
    """
    How to treat a fulfillment order that reports no supported actions at all.

    Shopify returns an empty list both when nothing is allowed and when the field is
    not populated for the API version in use, so the choice is a deployment setting.
    """

    ATTEMPT = 'attempt'
    """Capability data is unavailable; issue the call and let Shopify decide."""

    ABORT = 'abort'
    """Nothing is allowed; refuse the call."""


INACTIVE_FULFILLMENT_STATUSES = frozenset({
    'cancelled',
    'error',
    'failure',
})
"""Fulfillments in these states are ignored when looking for an existing shipment."""

IDEMPOTENCY_KEY_PREFIX = 'fulfillment_create_v1'
