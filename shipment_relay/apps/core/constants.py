""" Constants for the core app. """
from enum import Enum


class Status:
    """Health statuses."""
    OK = "OK"


class MediaTypes(Enum):
    """IANA Media Types (used to be called Mime-Types)"""

    JSON = 'application/json'


class HttpHeadersNames(Enum):
    """Standard HTTP Header Names"""

    IDEMPOTENCY_KEY = 'Idempotency-Key'
    """Lets the remote side collapse retried creation requests into one effect"""
