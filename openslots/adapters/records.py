"""
Conversion of raw event records into domain events.

Record format:
{
    "kind": "opening" | "appointment",
    "starts_at": "2020-04-17 09:30",
    "ends_at": "2020-04-17 12:30",
    "weekly_recurring": false
}

Timestamps may also be epoch milliseconds, e.g. "starts_at": 1587108600000.
"""

from typing import Any, Iterable, List, Mapping

import pendulum
from pendulum import DateTime

from ..domain.exceptions import InvalidEventError
from ..domain.models import Event, EventKind


def _parse_datetime(value: Any, timezone: str) -> DateTime:
    """
    Parse a timestamp to a pendulum DateTime in the given timezone.
    
    Strings are ISO 8601 (naive ones read as local time of ``timezone``),
    numbers are epoch milliseconds.
    """
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise InvalidEventError(f"Timestamp must be a string or epoch milliseconds, got {value!r}")
    
    if not isinstance(value, str):
        try:
            return pendulum.from_timestamp(value / 1000, tz=timezone)
        except (ValueError, OverflowError, OSError) as exc:
            raise InvalidEventError(f"Invalid epoch timestamp {value!r}: {exc}") from exc
    
    try:
        dt = pendulum.parse(value, tz=timezone)
    except ValueError as exc:
        raise InvalidEventError(f"Could not parse timestamp {value!r}: {exc}") from exc
    
    if isinstance(dt, DateTime):
        return dt.in_timezone(timezone)
    
    raise InvalidEventError(f"Timestamp {value!r} is not a date and time")


def _parse_weekly_recurring(value: Any) -> bool:
    """
    Read the recurrence flag.
    
    Booleans, and the 0/1 integers SQL stores hand back, are accepted.
    A missing flag means not recurring.
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    raise InvalidEventError(f"weekly_recurring must be a boolean, got {value!r}")


def _parse_kind(value: Any) -> EventKind:
    try:
        return EventKind(str(value).lower())
    except ValueError as exc:
        raise InvalidEventError(
            f"Unknown event kind {value!r}, expected 'opening' or 'appointment'"
        ) from exc


def parse_event_record(record: Mapping[str, Any], timezone: str) -> Event:
    """
    Parse one raw record into an Event.
    
    Args:
        record: Mapping with kind, starts_at, ends_at and weekly_recurring
        timezone: IANA timezone identifier used for naive timestamps
        
    Returns:
        Event instance
        
    Raises:
        InvalidEventError: If the record is malformed
    """
    if not isinstance(record, Mapping):
        raise InvalidEventError(f"Event record must be a mapping, got {type(record).__name__}")
    
    try:
        kind = _parse_kind(record["kind"])
        starts_at = _parse_datetime(record["starts_at"], timezone)
        ends_at = _parse_datetime(record["ends_at"], timezone)
    except KeyError as exc:
        raise InvalidEventError(f"Event record is missing field {exc}") from exc
    
    # Appointments never recur
    weekly_recurring = kind is EventKind.OPENING and _parse_weekly_recurring(record.get("weekly_recurring"))
    
    return Event(
        kind=kind,
        starts_at=starts_at,
        ends_at=ends_at,
        weekly_recurring=weekly_recurring,
    )


def parse_event_records(records: Iterable[Mapping[str, Any]], timezone: str) -> List[Event]:
    """Parse a collection of raw records, keeping their order."""
    return [parse_event_record(record, timezone) for record in records]
