"""
Shared fixtures for building events in tests.
"""

import json

import pendulum
import pytest

from openslots.domain.models import Event, EventKind

TZ = "Europe/Berlin"


def _parse(value: str) -> pendulum.DateTime:
    return pendulum.parse(value, tz=TZ)


def _opening(start: str, end: str, weekly_recurring: bool = False) -> Event:
    return Event(
        kind=EventKind.OPENING,
        starts_at=_parse(start),
        ends_at=_parse(end),
        weekly_recurring=weekly_recurring,
    )


def _appointment(start: str, end: str) -> Event:
    return Event(kind=EventKind.APPOINTMENT, starts_at=_parse(start), ends_at=_parse(end))


@pytest.fixture
def parse():
    """Parse a local timestamp in the test timezone."""
    return _parse


@pytest.fixture
def opening():
    """Build an opening event from two local timestamps."""
    return _opening


@pytest.fixture
def appointment():
    """Build an appointment event from two local timestamps."""
    return _appointment


@pytest.fixture
def events_file(tmp_path):
    """Write raw event records to a JSON file and return its path."""

    def _write(records):
        path = tmp_path / "events.json"
        path.write_text(json.dumps(records), encoding="utf-8")
        return path

    return _write
