"""Shared helpers for the Shipment Relay apps."""
