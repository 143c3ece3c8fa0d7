"""Daily job: compute tomorrow's windows and upsert them as calendar events."""

from datetime import date, datetime, timedelta
from typing import Callable, List, Optional
import logging

from ..core.formatting import TimeFormatter
from ..core.timebase import date_range
from ..core.timezones import DEFAULT_RESOLVER, TimezoneResolver
from ..model.config import CalendarConfig
from ..model.events import CalendarEvent, event_key
from ..pipeline import compute_daily_vedic_windows
from .store import EventSink

logger = logging.getLogger(__name__)


class DailyRunner:
    """Materializes one day of Vedic windows into an event sink."""

    def __init__(
        self,
        config: CalendarConfig,
        store: EventSink,
        resolver: Optional[TimezoneResolver] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """Initialize the runner.

        Args:
            config: Location, timezone and period settings
            store: Sink receiving one upsert per window
            resolver: Timezone resolver (default: zoneinfo)
            clock: Returns the current aware datetime (default: datetime.now)
        """
        self.config = config
        self.store = store
        self.resolver = resolver or DEFAULT_RESOLVER
        self.formatter = TimeFormatter()
        self._clock = clock or (lambda: datetime.now(self.resolver.tzinfo_for(config.timezone)))

    def tomorrow(self) -> date:
        now = self._clock().astimezone(self.resolver.tzinfo_for(self.config.timezone))
        return now.date() + timedelta(days=1)

    def run(self, day: Optional[date] = None) -> List[CalendarEvent]:
        """Upsert the four windows of `day` (default: tomorrow).

        Returns:
            The stored events, in window order
        """
        day = day or self.tomorrow()
        windows = compute_daily_vedic_windows(
            day,
            self.config.location,
            self.config.timezone,
            self.config.periods,
            resolver=self.resolver,
            formatter=self.formatter,
        )
        events = [
            self.store.upsert_event(
                event_key(day, w.label),
                self.formatter.event_title(day, w.label),
                w.start,
                w.end,
                w.description,
                self.config.location_name,
                self.config.timezone,
            )
            for w in windows
        ]
        logger.info("Vedic events created for %s", day.isoformat())
        return events

    def run_range(self, start: date, days: int) -> List[CalendarEvent]:
        out = []
        for d in date_range(start, days):
            out.extend(self.run(d))
        return out
