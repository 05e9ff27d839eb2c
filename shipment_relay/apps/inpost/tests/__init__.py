"""Tests for the InPost app."""
