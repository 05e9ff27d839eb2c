"""
InPost app: carrier tracking lookups and the ShipX webhook.
"""
