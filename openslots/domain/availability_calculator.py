"""
Core business logic for computing the weekly availability window.

Pure domain logic: the caller supplies the events, nothing here
performs I/O.
"""

from datetime import date
from typing import List, Sequence

from .models import DayBucket, Event, Window
from .projection import apply_appointment, apply_opening
from .window import build_window


class AvailabilityCalculator:
    """
    Folds a flat collection of events into a seven-day availability window.
    
    Algorithm:
    1. No events at all -> empty result
    2. Build the empty seven-day window starting at the anchor date
    3. Apply every opening, in collection order
    4. Subtract every appointment, in collection order
    
    All openings are applied before the first appointment, whatever the
    interleaving of the input, so a later opening can never bring back
    slots an appointment already took.
    """
    
    def calculate(self, anchor_date: date, events: Sequence[Event]) -> List[DayBucket]:
        """
        Compute the availability window for ``anchor_date``.
        
        Args:
            anchor_date: First day of the window
            events: All events from the store, in any order
            
        Returns:
            Seven day buckets, or an empty list when there are no events
        """
        if not events:
            return []
        
        window = build_window(anchor_date)
        window = self.apply_openings(window, events)
        window = self.apply_appointments(window, events)
        
        return list(window)
    
    @staticmethod
    def apply_openings(window: Window, events: Sequence[Event]) -> Window:
        for event in events:
            if event.is_opening:
                window = apply_opening(window, event)
        return window
    
    @staticmethod
    def apply_appointments(window: Window, events: Sequence[Event]) -> Window:
        for event in events:
            if event.is_appointment:
                window = apply_appointment(window, event)
        return window
