"""
Places and lifts holds on Shopify fulfillment orders.
"""
import logging

from django.conf import settings

from shipment_relay.apps.shopify.constants import EmptyCapabilitiesPolicy, FulfillmentOrderAction, OperationOutcome

logger = logging.getLogger(__name__)


def get_empty_capabilities_policy() -> EmptyCapabilitiesPolicy:
    """The configured policy. Validated at startup by ShopifyConfig.ready()."""
    return EmptyCapabilitiesPolicy(settings.SHOPIFY_EMPTY_CAPABILITIES_POLICY)


class HoldReleaseController:
    """
    Applies or lifts a hold, gated by the fulfillment order's live capabilities.

    Shopify exposes no hold state directly; `hold` and `release_hold` appearing in
    `supported_actions` is the only signal of which transition is legal right now.
    Calling either twice is Shopify's business: a refusal is reported as FAILED and not retried.
    """

    def __init__(self, client, prober, empty_capabilities_policy=None):
        self.client = client
        self.prober = prober
        self.empty_capabilities_policy = empty_capabilities_policy or get_empty_capabilities_policy()

    def request_hold(self, fulfillment_order_id) -> OperationOutcome:
        """
        Hold the fulfillment order if Shopify allows it.

        Returns:
            OperationOutcome: SUCCESS or FAILED from Shopify's answer, UNSUPPORTED when `hold`
            is not allowed (or the capability set is empty under the `abort` policy).
        """
        capabilities = self.prober.get_capabilities(fulfillment_order_id)

        if not capabilities:
            if self.empty_capabilities_policy is EmptyCapabilitiesPolicy.ABORT:
                logger.warning(
                    f"[HoldReleaseController] Fulfillment order [{fulfillment_order_id}] reports no supported "
                    "actions, not requesting a hold."
                )
                return OperationOutcome.UNSUPPORTED
            logger.info(
                f"[HoldReleaseController] Fulfillment order [{fulfillment_order_id}] reports no supported "
                "actions, requesting a hold anyway."
            )
        elif FulfillmentOrderAction.HOLD not in capabilities:
            logger.warning(
                f"[HoldReleaseController] Fulfillment order [{fulfillment_order_id}] does not support "
                f"[{FulfillmentOrderAction.HOLD}], supported: {sorted(capabilities)}."
            )
            return OperationOutcome.UNSUPPORTED

        held = self.client.hold_fulfillment_order(
            fulfillment_order_id,
            reason=settings.SHOPIFY_HOLD_REASON,
            reason_notes=settings.SHOPIFY_HOLD_REASON_NOTES,
        )
        if held:
            logger.info(f"[HoldReleaseController] Fulfillment order [{fulfillment_order_id}] is on hold.")
            return OperationOutcome.SUCCESS

        logger.warning(f"[HoldReleaseController] Shopify refused to hold fulfillment order [{fulfillment_order_id}].")
        return OperationOutcome.FAILED

    def release_hold_if_possible(self, fulfillment_order_id) -> OperationOutcome:
        """
        Release the hold if `release_hold` is currently allowed, otherwise do nothing.

        An empty capability set is skipped whatever the policy; releasing is best effort.

        Returns:
            OperationOutcome: SUCCESS, FAILED or SKIPPED.
        """
        capabilities = self.prober.get_capabilities(fulfillment_order_id)

        if FulfillmentOrderAction.RELEASE_HOLD not in capabilities:
            logger.info(
                f"[HoldReleaseController] Fulfillment order [{fulfillment_order_id}] has no hold to release."
            )
            return OperationOutcome.SKIPPED

        if self.client.release_fulfillment_order_hold(fulfillment_order_id):
            logger.info(f"[HoldReleaseController] Released hold on fulfillment order [{fulfillment_order_id}].")
            return OperationOutcome.SUCCESS

        logger.warning(
            f"[HoldReleaseController] Shopify refused to release the hold on fulfillment order "
            f"[{fulfillment_order_id}]."
        )
        return OperationOutcome.FAILED
