"""Tests for the Shopify app."""
