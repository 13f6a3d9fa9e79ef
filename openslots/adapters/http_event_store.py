"""
HTTP client for fetching events from a REST event store.
"""

import logging
from typing import Dict, List, Optional

import requests

from ..domain.exceptions import EventStoreError
from ..domain.models import Event
from .json_event_store import extract_records
from .records import parse_event_records

logger = logging.getLogger(__name__)


class HttpEventStore:
    """
    Client for an event store exposed over HTTP.
    
    Uses ``GET {base_url}/events``, which must answer with a JSON list of
    event records (or an object with an ``events`` list). The full
    collection is fetched every time, no pagination or filtering.
    """
    
    EVENTS_PATH = "/events"
    
    def __init__(
        self,
        base_url: str,
        timezone: str = "UTC",
        api_token: Optional[str] = None,
        timeout: int = 30
    ):
        """
        Initialize the client.
        
        Args:
            base_url: Base URL of the event store API
            timezone: IANA timezone identifier for naive timestamps
            api_token: Optional bearer token
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timezone = timezone
        self.timeout = timeout
        self.headers: Dict[str, str] = {"Accept": "application/json"}
        if api_token:
            self.headers["Authorization"] = f"Bearer {api_token}"
    
    @property
    def events_url(self) -> str:
        return f"{self.base_url}{self.EVENTS_PATH}"
    
    def fetch_events(self) -> List[Event]:
        """
        Fetch all events from the API.
        
        Returns:
            Events in the order the API returned them
            
        Raises:
            EventStoreError: If the request fails or the body is not JSON
            InvalidEventError: If a record is malformed
        """
        try:
            response = requests.get(
                self.events_url,
                headers=self.headers,
                timeout=self.timeout
            )
            response.raise_for_status()
            payload = response.json()
        
        except requests.exceptions.RequestException as e:
            raise EventStoreError(f"Failed to fetch events from {self.events_url}: {e}") from e
        except ValueError as e:
            raise EventStoreError(f"Event store returned invalid JSON: {e}") from e
        
        records = extract_records(payload, self.events_url)
        logger.debug("Fetched %d event records from %s", len(records), self.events_url)
        
        return parse_event_records(records, self.timezone)
