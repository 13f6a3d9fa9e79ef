"""
Domain models for events and the computed availability window.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Tuple

from pendulum import Date, DateTime


class EventKind(str, Enum):
    """The two kinds of calendar events the store holds."""
    OPENING = "opening"
    APPOINTMENT = "appointment"


@dataclass(frozen=True)
class Event:
    """
    An immutable calendar event as read from the event store.
    
    Openings declare availability (optionally repeating every week on the
    weekday of ``starts_at``), appointments consume it.
    """
    kind: EventKind
    starts_at: DateTime
    ends_at: DateTime
    weekly_recurring: bool = False  # Only meaningful for openings
    
    @property
    def is_opening(self) -> bool:
        return self.kind is EventKind.OPENING
    
    @property
    def is_appointment(self) -> bool:
        return self.kind is EventKind.APPOINTMENT
    
    @property
    def date(self) -> Date:
        """Calendar date the event starts on."""
        return self.starts_at.date()
    
    def spans_single_day(self) -> bool:
        """Check if the event starts and ends on the same calendar day."""
        return self.starts_at.date() == self.ends_at.date()
    
    def __str__(self) -> str:
        recurring = " (weekly)" if self.weekly_recurring else ""
        return (
            f"{self.kind.value} {self.starts_at.format('YYYY-MM-DD HH:mm')}"
            f" - {self.ends_at.format('HH:mm')}{recurring}"
        )


@dataclass(frozen=True)
class DayBucket:
    """
    One calendar day of computed availability.
    
    Slots are unique labels in chronological order.
    """
    date: Date
    slots: Tuple[str, ...] = field(default_factory=tuple)
    
    def with_slots(self, slots: Iterable[str]) -> "DayBucket":
        """Return a copy of this bucket holding the given slots."""
        return DayBucket(date=self.date, slots=tuple(slots))
    
    def to_dict(self) -> Dict[str, Any]:
        """Render the bucket as a JSON-friendly mapping."""
        return {
            "date": self.date.to_date_string(),
            "slots": list(self.slots),
        }


# Ordered sequence of consecutive day buckets
Window = Tuple[DayBucket, ...]
