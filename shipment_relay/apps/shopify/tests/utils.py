"""In-memory stand-in for the Shopify Admin API client."""


class FakeShopifyClient:
    """
    Holds one shop's orders, fulfillment orders and fulfillments in memory.

    Implements the ShopifyAPIClient methods the orchestrator uses, with Shopify's
    state transitions: a hold swaps `hold` for `release_hold` in `supported_actions`,
    and a fulfillment closes the fulfillment order. Every call is recorded in `calls`.
    """

    def __init__(self, orders=None, fulfillment_orders=None, fulfillments=None):
        self.orders = orders or []
        self.fulfillment_orders = fulfillment_orders or {}
        self.fulfillments = fulfillments or {}
        self.calls = []
        self.next_fulfillment_id = 900

    def calls_to(self, method):
        return [args for name, args in self.calls if name == method]

    def search_orders_by_name(self, order_name):
        self.calls.append(('search_orders_by_name', (order_name,)))
        return [order for order in self.orders if order['name'] == order_name]

    def get_fulfillment_orders(self, order_id):
        self.calls.append(('get_fulfillment_orders', (order_id,)))
        return [fo for fo in self.fulfillment_orders.values() if fo['order_id'] == order_id]

    def get_fulfillment_order(self, fulfillment_order_id):
        self.calls.append(('get_fulfillment_order', (fulfillment_order_id,)))
        return self.fulfillment_orders.get(fulfillment_order_id)

    def hold_fulfillment_order(self, fulfillment_order_id, reason, reason_notes):
        self.calls.append(('hold_fulfillment_order', (fulfillment_order_id, reason, reason_notes)))
        fulfillment_order = self.fulfillment_orders[fulfillment_order_id]
        if 'hold' not in fulfillment_order['supported_actions']:
            return False
        fulfillment_order['status'] = 'on_hold'
        fulfillment_order['supported_actions'] = ['release_hold']
        return True

    def release_fulfillment_order_hold(self, fulfillment_order_id):
        self.calls.append(('release_fulfillment_order_hold', (fulfillment_order_id,)))
        fulfillment_order = self.fulfillment_orders[fulfillment_order_id]
        if 'release_hold' not in fulfillment_order['supported_actions']:
            return False
        fulfillment_order['status'] = 'open'
        fulfillment_order['supported_actions'] = ['create_fulfillment', 'hold']
        return True

    def get_fulfillments(self, order_id):
        self.calls.append(('get_fulfillments', (order_id,)))
        return list(self.fulfillments.get(order_id, []))

    def create_fulfillment(self, fulfillment_order_id, tracking_number, tracking_company, notify_customer,
                           idempotency_key):
        self.calls.append((
            'create_fulfillment',
            (fulfillment_order_id, tracking_number, tracking_company, notify_customer, idempotency_key),
        ))
        fulfillment_order = self.fulfillment_orders[fulfillment_order_id]
        if 'create_fulfillment' not in fulfillment_order['supported_actions']:
            return None
        fulfillment_order['status'] = 'closed'
        fulfillment_order['supported_actions'] = []
        fulfillment = {
            'id': self.next_fulfillment_id,
            'order_id': fulfillment_order['order_id'],
            'status': 'success',
            'tracking_number': tracking_number,
            'tracking_numbers': [tracking_number],
        }
        self.next_fulfillment_id += 1
        self.fulfillments.setdefault(fulfillment_order['order_id'], []).append(fulfillment)
        return fulfillment

    def update_fulfillment_tracking(self, fulfillment_id, tracking_number, tracking_company, notify_customer):
        self.calls.append((
            'update_fulfillment_tracking',
            (fulfillment_id, tracking_number, tracking_company, notify_customer),
        ))
        for fulfillments in self.fulfillments.values():
            for fulfillment in fulfillments:
                if fulfillment['id'] == fulfillment_id:
                    fulfillment['tracking_number'] = tracking_number
                    fulfillment['tracking_numbers'] = [tracking_number]
                    return fulfillment
        return None


def make_shop(supported_actions=('create_fulfillment', 'hold'), fulfillments=None):
    """A shop with order #1001 (id 1) and its single fulfillment order (id 11)."""
    return FakeShopifyClient(
        orders=[{'id': 1, 'name': '#1001'}],
        fulfillment_orders={
            11: {'id': 11, 'order_id': 1, 'status': 'open', 'supported_actions': list(supported_actions)},
        },
        fulfillments={1: list(fulfillments or [])},
    )
