"""
Domain layer - Pure business logic without external dependencies.
"""

from .availability_calculator import AvailabilityCalculator
from .models import DayBucket, Event, EventKind, Window
from .projection import apply_appointment, apply_opening
from .slot_generator import SLOT_MINUTES, generate_slots
from .window import WINDOW_DAYS, build_window

__all__ = [
    "AvailabilityCalculator",
    "DayBucket",
    "Event",
    "EventKind",
    "Window",
    "apply_appointment",
    "apply_opening",
    "SLOT_MINUTES",
    "generate_slots",
    "WINDOW_DAYS",
    "build_window",
]
