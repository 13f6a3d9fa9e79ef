"""
File-backed event store reading raw event records from a JSON document.
"""

import json
import logging
from pathlib import Path
from typing import Any, List

from ..domain.exceptions import EventStoreError
from ..domain.models import Event
from .records import parse_event_records

logger = logging.getLogger(__name__)


def extract_records(payload: Any, source: str) -> List[Any]:
    """
    Pull the record list out of a decoded payload.
    
    Accepts either a bare list of records or an object with an
    ``events`` list.
    """
    if isinstance(payload, dict):
        payload = payload.get("events", [])
    
    if not isinstance(payload, list):
        raise EventStoreError(
            f"Expected a list of events from {source}, got {type(payload).__name__}"
        )
    
    return payload


class JsonEventStore:
    """
    Event store backed by a JSON file.
    
    The whole file is read on every fetch, so edits are picked up
    without restarting.
    """
    
    def __init__(self, path: Path, timezone: str = "UTC"):
        """
        Initialize the store.
        
        Args:
            path: Path to the JSON events file
            timezone: IANA timezone identifier for naive timestamps
        """
        self.path = Path(path)
        self.timezone = timezone
    
    def fetch_events(self) -> List[Event]:
        """
        Load all events from the file.
        
        Returns:
            Events in file order; empty if the file does not exist
            
        Raises:
            EventStoreError: If the file cannot be read or decoded
            InvalidEventError: If a record is malformed
        """
        if not self.path.exists():
            logger.warning("Events file %s not found, treating it as empty", self.path)
            return []
        
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except json.JSONDecodeError as exc:
            raise EventStoreError(f"Invalid JSON in {self.path}: {exc}") from exc
        except OSError as exc:
            raise EventStoreError(f"Could not read events file {self.path}: {exc}") from exc
        
        records = extract_records(payload, str(self.path))
        logger.debug("Loaded %d event records from %s", len(records), self.path)
        
        return parse_event_records(records, self.timezone)
