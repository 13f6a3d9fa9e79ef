"""
Service layer helpers that orchestrate adapters and domain logic.
"""

from .availability_service import AvailabilityService, EventStoreProtocol

__all__ = ["AvailabilityService", "EventStoreProtocol"]
