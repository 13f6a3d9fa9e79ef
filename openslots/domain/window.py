"""
Builds the empty seven-day skeleton the events are projected onto.
"""

from datetime import date

import pendulum

from .models import DayBucket, Window

WINDOW_DAYS = 7


def to_calendar_date(value: date) -> pendulum.Date:
    """Normalize a date or datetime to a pendulum Date (time of day dropped)."""
    return pendulum.date(value.year, value.month, value.day)


def build_window(anchor_date: date) -> Window:
    """
    Build the window for ``anchor_date`` and the six following days.
    
    Every bucket starts with no slots.
    """
    first_day = to_calendar_date(anchor_date)
    return tuple(
        DayBucket(date=first_day.add(days=offset))
        for offset in range(WINDOW_DAYS)
    )
