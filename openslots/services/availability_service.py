"""
Application service computing availabilities from the event store.

The service performs the single read from the event store and delegates
the computation to the domain-level ``AvailabilityCalculator``. The store
is typed as a simple protocol so tests can plug in a stub.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional, Protocol

from ..domain.availability_calculator import AvailabilityCalculator
from ..domain.models import DayBucket, Event

logger = logging.getLogger(__name__)


class EventStoreProtocol(Protocol):
    """Protocol describing the event store behaviour needed by the service."""

    def fetch_events(self) -> List[Event]:
        """Return every stored event, in no particular order."""


class AvailabilityService:
    """
    Orchestrates event retrieval and availability calculation.

    Each call works on its own window; nothing is cached between calls.
    """

    def __init__(
        self,
        event_store: EventStoreProtocol,
        calculator: Optional[AvailabilityCalculator] = None,
    ) -> None:
        self._event_store = event_store
        self._calculator = calculator or AvailabilityCalculator()

    def compute_availabilities(self, anchor_date: date) -> List[DayBucket]:
        """
        Compute the seven-day availability window starting at ``anchor_date``.

        Store errors propagate unchanged. Returns an empty list when the
        store holds no events.
        """
        events = self.fetch_events()

        if not events:
            logger.info("No events in store, returning empty availabilities")
            return []

        logger.debug(
            "Computing availabilities from %d openings and %d appointments",
            sum(1 for event in events if event.is_opening),
            sum(1 for event in events if event.is_appointment),
        )

        return self._calculator.calculate(anchor_date, events)

    def fetch_events(self) -> List[Event]:
        """Fetch the full event collection from the store."""
        return list(self._event_store.fetch_events() or [])
