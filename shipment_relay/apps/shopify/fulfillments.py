"""
Records shipments on Shopify orders without notifying the customer twice.
"""
import hashlib
import logging

from django.conf import settings

from shipment_relay.apps.shopify.constants import (
    IDEMPOTENCY_KEY_PREFIX,
    INACTIVE_FULFILLMENT_STATUSES,
    OperationOutcome
)

logger = logging.getLogger(__name__)


def normalize_tracking_number(tracking_number) -> str:
    return (tracking_number or '').strip()


def fulfillment_idempotency_key(tracking_number) -> str:
    """
    Key for the create-fulfillment request, a pure function of the tracking number.

    A retried request for the same parcel carries the same key, so Shopify can collapse it.
    """
    digest = hashlib.sha256(normalize_tracking_number(tracking_number).upper().encode('utf-8')).hexdigest()
    return f'{IDEMPOTENCY_KEY_PREFIX}_{digest[:32]}'


def tracking_numbers_of(fulfillment):
    """All tracking numbers recorded on a fulfillment, as Shopify reports them in two fields."""
    numbers = []
    single = fulfillment.get('tracking_number')
    if isinstance(single, str) and single.strip():
        numbers.append(single.strip())
    many = fulfillment.get('tracking_numbers')
    if isinstance(many, (list, tuple)):
        numbers.extend(number.strip() for number in many if isinstance(number, str) and number.strip())
    return numbers


def is_active(fulfillment) -> bool:
    return isinstance(fulfillment, dict) and fulfillment.get('status') not in INACTIVE_FULFILLMENT_STATUSES


class FulfillmentCommitter:
    """
    Creates or updates the single fulfillment of an order.

    Reads before writing so that a redelivered carrier event never triggers a second
    shipping confirmation email, and issues at most one write per call:

    1. a fulfillment already carries the tracking number: nothing to do;
    2. a fulfillment exists: replace its tracking number and notify;
    3. otherwise: create a fulfillment for the fulfillment order and notify.
    """

    def __init__(self, client):
        self.client = client
        self.tracking_company = settings.SHOPIFY_TRACKING_COMPANY

    def fulfill(self, order_id, fulfillment_order_id, tracking_number) -> OperationOutcome:
        """
        Args:
            order_id (int): Shopify order id.
            fulfillment_order_id (int): Fulfillment order a new fulfillment would cover.
            tracking_number (str): Carrier tracking number to record.

        Returns:
            OperationOutcome: SUCCESS or FAILED.

        Raises:
            ShopifyTransportError: Shopify could not be reached.
        """
        tracking_number = normalize_tracking_number(tracking_number)
        if not tracking_number:
            logger.warning(f"[FulfillmentCommitter] No tracking number given for order [{order_id}].")
            return OperationOutcome.FAILED

        fulfillments = self.client.get_fulfillments(order_id)
        if fulfillments is None:
            # Without the list we cannot tell whether the customer was already notified.
            logger.warning(
                f"[FulfillmentCommitter] Could not list fulfillments of order [{order_id}], not writing."
            )
            return OperationOutcome.FAILED

        active = [fulfillment for fulfillment in fulfillments if is_active(fulfillment)]
        wanted = tracking_number.casefold()

        for fulfillment in active:
            if any(number.casefold() == wanted for number in tracking_numbers_of(fulfillment)):
                logger.info(
                    f"[FulfillmentCommitter] Order [{order_id}] fulfillment [{fulfillment.get('id')}] already "
                    f"carries tracking number [{tracking_number}], nothing to do."
                )
                return OperationOutcome.SUCCESS

        if active:
            return self._update_existing(order_id, active[0], tracking_number)

        return self._create(order_id, fulfillment_order_id, tracking_number)

    def _update_existing(self, order_id, fulfillment, tracking_number) -> OperationOutcome:
        fulfillment_id = fulfillment.get('id')
        updated = self.client.update_fulfillment_tracking(
            fulfillment_id,
            tracking_number=tracking_number,
            tracking_company=self.tracking_company,
            notify_customer=True,
        )
        if updated is None:
            logger.warning(
                f"[FulfillmentCommitter] Shopify refused to update fulfillment [{fulfillment_id}] of order "
                f"[{order_id}] with tracking number [{tracking_number}]."
            )
            return OperationOutcome.FAILED

        logger.info(
            f"[FulfillmentCommitter] Updated fulfillment [{fulfillment_id}] of order [{order_id}] "
            f"with tracking number [{tracking_number}]."
        )
        return OperationOutcome.SUCCESS

    def _create(self, order_id, fulfillment_order_id, tracking_number) -> OperationOutcome:
        created = self.client.create_fulfillment(
            fulfillment_order_id,
            tracking_number=tracking_number,
            tracking_company=self.tracking_company,
            notify_customer=True,
            idempotency_key=fulfillment_idempotency_key(tracking_number),
        )
        if created is None:
            logger.warning(
                f"[FulfillmentCommitter] Shopify refused to create a fulfillment for fulfillment order "
                f"[{fulfillment_order_id}] of order [{order_id}]."
            )
            return OperationOutcome.FAILED

        logger.info(
            f"[FulfillmentCommitter] Created fulfillment [{created.get('id')}] for order [{order_id}] "
            f"with tracking number [{tracking_number}]."
        )
        return OperationOutcome.SUCCESS
