"""
Order fulfillment orchestration: the two operations carrier events drive on Shopify.
"""
import logging

from shipment_relay.apps.shopify.capabilities import CapabilityProber
from shipment_relay.apps.shopify.clients import ShopifyAPIClient
from shipment_relay.apps.shopify.constants import FULFILL_ACTIONS, EmptyCapabilitiesPolicy, OperationOutcome
from shipment_relay.apps.shopify.exceptions import ShopifyTransportError
from shipment_relay.apps.shopify.fulfillments import FulfillmentCommitter, normalize_tracking_number
from shipment_relay.apps.shopify.holds import HoldReleaseController, get_empty_capabilities_policy
from shipment_relay.apps.shopify.resolver import ResourceResolver

logger = logging.getLogger(__name__)


class FulfillmentOrchestrator:
    """
    Façade used by the webhook signal receivers.

    Every call re-resolves the order, its fulfillment order and the fulfillment order's
    capabilities from Shopify; nothing is remembered between calls. Business failures
    (unknown order, unsupported transition, refused request, unreachable Shopify) come back
    as False so the caller can decide whether to acknowledge the event.
    """

    def __init__(self, client=None, empty_capabilities_policy=None):
        self.client = client or ShopifyAPIClient()
        self.empty_capabilities_policy = empty_capabilities_policy or get_empty_capabilities_policy()
        self.resolver = ResourceResolver(self.client)
        self.prober = CapabilityProber(self.client)
        self.holds = HoldReleaseController(self.client, self.prober, self.empty_capabilities_policy)
        self.committer = FulfillmentCommitter(self.client)

    def put_on_hold(self, order_name) -> bool:
        """
        Hold the fulfillment of `order_name` because a shipping label was created.

        Returns:
            bool: True only if Shopify accepted the hold.
        """
        try:
            resolved = self.resolver.resolve(order_name)
            if resolved is None:
                logger.warning(f"[FulfillmentOrchestrator.put_on_hold] Order [{order_name}] could not be resolved.")
                return False

            outcome = self.holds.request_hold(resolved.fulfillment_order_id)
        except ShopifyTransportError:
            logger.exception(f"[FulfillmentOrchestrator.put_on_hold] Shopify unreachable for order [{order_name}].")
            return False

        logger.info(
            f"[FulfillmentOrchestrator.put_on_hold] Order [{order_name}] ({resolved.order_id}) "
            f"fulfillment order [{resolved.fulfillment_order_id}]: {outcome.value}."
        )
        return outcome is OperationOutcome.SUCCESS

    def mark_fulfilled(self, order_name, tracking_number) -> bool:
        """
        Release any hold on `order_name` and record `tracking_number` as its shipment.

        Returns:
            bool: True if the order carries the tracking number afterwards.
        """
        tracking_number = normalize_tracking_number(tracking_number)
        if not tracking_number:
            logger.warning(
                f"[FulfillmentOrchestrator.mark_fulfilled] No tracking number given for order [{order_name}]."
            )
            return False

        try:
            resolved = self.resolver.resolve(order_name)
            if resolved is None:
                logger.warning(
                    f"[FulfillmentOrchestrator.mark_fulfilled] Order [{order_name}] could not be resolved."
                )
                return False

            # Best effort: a failed release still leaves Shopify to judge the fulfillment below.
            self.holds.release_hold_if_possible(resolved.fulfillment_order_id)

            if not self._fulfillment_allowed(resolved.fulfillment_order_id):
                return False

            outcome = self.committer.fulfill(resolved.order_id, resolved.fulfillment_order_id, tracking_number)
        except ShopifyTransportError:
            logger.exception(
                f"[FulfillmentOrchestrator.mark_fulfilled] Shopify unreachable for order [{order_name}]."
            )
            return False

        logger.info(
            f"[FulfillmentOrchestrator.mark_fulfilled] Order [{order_name}] ({resolved.order_id}) "
            f"tracking number [{tracking_number}]: {outcome.value}."
        )
        return outcome is OperationOutcome.SUCCESS

    def _fulfillment_allowed(self, fulfillment_order_id) -> bool:
        """Probe again after the release; the release itself changes what is allowed."""
        capabilities = self.prober.get_capabilities(fulfillment_order_id)

        if capabilities & FULFILL_ACTIONS:
            return True

        if capabilities:
            logger.warning(
                f"[FulfillmentOrchestrator.mark_fulfilled] Fulfillment order [{fulfillment_order_id}] cannot be "
                f"fulfilled, supported: {sorted(capabilities)}."
            )
            return False

        if self.empty_capabilities_policy is EmptyCapabilitiesPolicy.ABORT:
            logger.warning(
                f"[FulfillmentOrchestrator.mark_fulfilled] Fulfillment order [{fulfillment_order_id}] reports no "
                "supported actions, not fulfilling."
            )
            return False

        logger.info(
            f"[FulfillmentOrchestrator.mark_fulfilled] Fulfillment order [{fulfillment_order_id}] reports no "
            "supported actions, fulfilling anyway."
        )
        return True
