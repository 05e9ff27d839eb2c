"""
shipment-relay module.
"""

# This is the canonical Shipment Relay version, used in pyproject.toml.
__version__ = '0.1.0'
