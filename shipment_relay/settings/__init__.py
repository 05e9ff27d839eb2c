"""Settings modules for Shipment Relay."""
