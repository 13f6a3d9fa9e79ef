"""
Projection of single events onto an availability window.

Both operations are pure: they return a new window and leave the one
passed in untouched.
"""

from typing import Set

from .models import DayBucket, Event, Window
from .slot_generator import generate_slots


def _opening_applies_to(event: Event, bucket: DayBucket) -> bool:
    """
    Decide whether an opening covers the bucket's day.
    
    Weekly openings match on the numeric weekday, one-off openings
    on the exact calendar date.
    """
    if event.weekly_recurring:
        return bucket.date.day_of_week == event.starts_at.day_of_week
    return bucket.date == event.date


def apply_opening(window: Window, event: Event) -> Window:
    """
    Replace the slots of every bucket the opening applies to.
    
    Slots are replaced, not merged: when several openings match the same
    day, the last one applied wins.
    
    Args:
        window: Current availability window
        event: Opening event
        
    Returns:
        New window with the opening projected onto it
    """
    if not event.spans_single_day():
        return window
    
    slots = generate_slots(event.starts_at, event.ends_at)
    
    return tuple(
        bucket.with_slots(slots) if _opening_applies_to(event, bucket) else bucket
        for bucket in window
    )


def apply_appointment(window: Window, event: Event) -> Window:
    """
    Remove the slots occupied by an appointment from its day.
    
    Appointments never recur, so only the bucket with the same calendar
    date is affected. Remaining slots keep their order.
    
    Args:
        window: Current availability window
        event: Appointment event
        
    Returns:
        New window with the appointment subtracted
    """
    busy: Set[str] = set(generate_slots(event.starts_at, event.ends_at))
    
    if not busy:
        return window
    
    return tuple(
        bucket.with_slots(slot for slot in bucket.slots if slot not in busy)
        if bucket.date == event.date else bucket
        for bucket in window
    )
