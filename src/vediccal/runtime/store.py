"""Calendar event stores.

Every store is an idempotent upsert keyed by "<date>/<label>", so running the
daily job twice, or retrying it after a failure, never duplicates an event.
"""
from datetime import date, datetime
from threading import RLock
from typing import Dict, List, Optional, Protocol
import logging

from ..model.events import CalendarEvent

logger = logging.getLogger(__name__)


class EventSink(Protocol):
    def upsert_event(
        self,
        key: str,
        title: str,
        start: datetime,
        end: datetime,
        description: str,
        location: str,
        timezone_id: str,
    ) -> CalendarEvent:
        ...


class MemoryCalendarStore:
    """Thread-safe in-memory event store."""

    def __init__(self):
        self._events: Dict[str, CalendarEvent] = {}
        self._lock = RLock()

    def upsert_event(
        self,
        key: str,
        title: str,
        start: datetime,
        end: datetime,
        description: str,
        location: str,
        timezone_id: str,
    ) -> CalendarEvent:
        """Create the event for `key`, or replace it if it already exists.

        Returns:
            The stored CalendarEvent
        """
        event = CalendarEvent(
            key=key,
            title=title,
            start=start,
            end=end,
            description=description,
            location=location,
            timezone=timezone_id,
        )
        with self._lock:
            old = self._events.get(key)
            self._events[key] = event
            changed = old != event
            if changed:
                self._on_change(event, old)
        if changed:
            logger.debug("%s event %s", "Updated" if old else "Created", key)
        return event

    def get_event(self, key: str) -> Optional[CalendarEvent]:
        with self._lock:
            return self._events.get(key)

    def get_all_events(self) -> List[CalendarEvent]:
        with self._lock:
            return sorted(self._events.values(), key=lambda e: (e.start, e.key))

    def events_for_day(self, day: date) -> List[CalendarEvent]:
        prefix = f"{day.isoformat()}/"
        return [e for e in self.get_all_events() if e.key.startswith(prefix)]

    def count(self) -> int:
        with self._lock:
            return len(self._events)

    def _on_change(self, new: CalendarEvent, old: Optional[CalendarEvent]) -> None:
        """Hook called under the lock whenever an upsert changes the store."""
