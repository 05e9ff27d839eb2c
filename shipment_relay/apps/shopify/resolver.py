"""
Maps human readable order names onto Shopify's internal ids.
"""
import logging
from typing import NamedTuple, Optional

from shipment_relay.apps.shopify.constants import ORDER_NAME_PREFIX

logger = logging.getLogger(__name__)


class ResolvedOrder(NamedTuple):
    """The Shopify entities an orchestration works on."""
    order_id: int
    fulfillment_order_id: int


def normalize_order_name(order_name) -> str:
    """
    Ensure a leading `#`, since Shopify searches by display name.

    >>> normalize_order_name('1001')
    '#1001'
    >>> normalize_order_name(' #1001 ')
    '#1001'
    """
    name = (order_name or '').strip()
    if not name:
        return ''
    if name.startswith(ORDER_NAME_PREFIX):
        return name
    return f'{ORDER_NAME_PREFIX}{name}'


class ResourceResolver:
    """
    Resolves an order name to its order id and then to its fulfillment order id.

    Both steps take the first match. Shopify does not guarantee order names are unique and an
    order may be split over several fulfillment orders; neither case is disambiguated.

    Not finding something is reported as `None`. Only `ShopifyTransportError` escapes.
    """

    def __init__(self, client):
        self.client = client

    def resolve_order_id(self, order_name) -> Optional[int]:
        """
        Return the id of the first order named `order_name`, whatever its status.
        """
        name = normalize_order_name(order_name)
        if not name:
            logger.warning("[ResourceResolver] Refusing to look up a blank order name.")
            return None

        orders = self.client.search_orders_by_name(name)
        if not orders:
            logger.warning(f"[ResourceResolver] No order found named [{name}].")
            return None

        if len(orders) > 1:
            logger.info(f"[ResourceResolver] {len(orders)} orders are named [{name}], using the first.")

        order_id = orders[0].get('id') if isinstance(orders[0], dict) else None
        if order_id is None:
            logger.warning(f"[ResourceResolver] First order named [{name}] carries no id.")
        return order_id

    def resolve_fulfillment_order_id(self, order_id) -> Optional[int]:
        """
        Return the id of the first fulfillment order of `order_id`.
        """
        fulfillment_orders = self.client.get_fulfillment_orders(order_id)
        if not fulfillment_orders:
            logger.warning(f"[ResourceResolver] Order [{order_id}] has no fulfillment orders.")
            return None

        fulfillment_order_id = (
            fulfillment_orders[0].get('id') if isinstance(fulfillment_orders[0], dict) else None
        )
        if fulfillment_order_id is None:
            logger.warning(f"[ResourceResolver] First fulfillment order of order [{order_id}] carries no id.")
        return fulfillment_order_id

    def resolve(self, order_name) -> Optional[ResolvedOrder]:
        """
        Resolve both ids for `order_name`, or `None` if either is missing.
        """
        order_id = self.resolve_order_id(order_name)
        if order_id is None:
            return None

        fulfillment_order_id = self.resolve_fulfillment_order_id(order_id)
        if fulfillment_order_id is None:
            return None

        return ResolvedOrder(order_id=order_id, fulfillment_order_id=fulfillment_order_id)


def order_name_from_fulfillment_name(fulfillment_name) -> str:
    """
    Strip the `.N` suffix Shopify appends to an order name to name its fulfillments.

    >>> order_name_from_fulfillment_name('#1001.2')
    '#1001'
    """
    name = (fulfillment_name or '').strip()
    base, separator, suffix = name.rpartition('.')
    if separator and base and suffix.isdigit():
        return base
    return name
