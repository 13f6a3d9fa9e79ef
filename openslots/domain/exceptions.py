"""
Domain-specific exception hierarchy for the openslots application.
"""


class OpenSlotsError(Exception):
    """Base class for all application-level errors."""


class EventStoreError(OpenSlotsError):
    """Raised when events cannot be fetched from the store or decoded."""


class InvalidEventError(OpenSlotsError):
    """Raised when a raw event record is malformed."""
