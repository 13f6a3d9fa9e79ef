"""
Splits a same-day time interval into fixed-size slot labels.
"""

from typing import List

from pendulum import DateTime

SLOT_MINUTES = 30
SLOT_LABEL_FORMAT = "H:mm"


def format_slot(moment: DateTime) -> str:
    """Render a slot label, e.g. ``9:30`` or ``13:00``."""
    return moment.format(SLOT_LABEL_FORMAT)


def generate_slots(
    start: DateTime,
    end: DateTime,
    step_minutes: int = SLOT_MINUTES
) -> List[str]:
    """
    Generate the slot labels covered by the half-open interval ``[start, end)``.
    
    Example:
    09:30 - 12:30 -> ["9:30", "10:00", "10:30", "11:00", "11:30", "12:00"]
    
    Args:
        start: Start of the interval
        end: End of the interval (exclusive)
        step_minutes: Slot granularity
        
    Returns:
        Ordered list of slot labels. Empty if the interval crosses midnight.
    """
    if start.date() != end.date():
        return []
    
    slots: List[str] = []
    
    # pendulum arithmetic returns new objects, start is never touched
    cursor = start
    while cursor < end:
        slots.append(format_slot(cursor))
        cursor = cursor.add(minutes=step_minutes)
    
    return slots
