"""
Shopify app: drives order fulfillment state on the Shopify Admin API.
"""
