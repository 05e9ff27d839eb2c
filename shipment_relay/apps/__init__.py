"""Django apps making up Shipment Relay."""
