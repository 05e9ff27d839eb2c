"""
Reads what Shopify currently allows on a fulfillment order.
"""
import logging
from typing import FrozenSet

logger = logging.getLogger(__name__)


def extract_capabilities(fulfillment_order) -> FrozenSet[str]:
    """
    Return the `supported_actions` of a fulfillment order as a set.

    A missing or malformed field is an empty set, never an error.
    """
    if not isinstance(fulfillment_order, dict):
        return frozenset()

    actions = fulfillment_order.get('supported_actions')
    if not isinstance(actions, (list, tuple)):
        return frozenset()

    return frozenset(action for action in actions if isinstance(action, str) and action)


class CapabilityProber:
    """
    Fetches the live capability set of a fulfillment order.

    Nothing is cached: Shopify's workflow state moves underneath us, so every
    state-changing call must be preceded by a fresh probe.
    """

    def __init__(self, client):
        self.client = client

    def get_capabilities(self, fulfillment_order_id) -> FrozenSet[str]:
        """
        Args:
            fulfillment_order_id (int): Fulfillment order to inspect.

        Returns:
            frozenset: Names of the currently supported actions. Empty when Shopify
            reports none or the fulfillment order could not be read.

        Raises:
            ShopifyTransportError: Shopify could not be reached.
        """
        fulfillment_order = self.client.get_fulfillment_order(fulfillment_order_id)
        if fulfillment_order is None:
            logger.warning(
                f"[CapabilityProber] Could not read fulfillment order [{fulfillment_order_id}], "
                "treating its capabilities as unavailable."
            )
            return frozenset()

        capabilities = extract_capabilities(fulfillment_order)
        logger.info(
            f"[CapabilityProber] Fulfillment order [{fulfillment_order_id}] supports {sorted(capabilities)}."
        )
        return capabilities
