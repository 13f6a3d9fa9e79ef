"""
Adapters layer - Event store integrations (JSON file, HTTP API).
"""

from .http_event_store import HttpEventStore
from .json_event_store import JsonEventStore
from .records import parse_event_record, parse_event_records

__all__ = ["HttpEventStore", "JsonEventStore", "parse_event_record", "parse_event_records"]
