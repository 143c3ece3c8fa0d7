"""Read-only REST API over the window pipeline and the event store."""

from datetime import date
from typing import Optional
from fastapi import FastAPI, HTTPException
import logging

from .. import __version__
from ..core.solar import SolarCalculator
from ..errors import VedicCalendarError
from ..model.config import CalendarConfig
from ..pipeline import compute_daily_vedic_windows
from ..runtime.store import MemoryCalendarStore

logger = logging.getLogger(__name__)


def _parse_day(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid date: {value}")


class VedicRestAPI:
    """FastAPI application exposing windows, sun times and stored events."""

    def __init__(
        self,
        config: CalendarConfig,
        store: Optional[MemoryCalendarStore] = None,
    ):
        """Initialize REST API.

        Args:
            config: Calendar configuration served by the API
            store: Event store backing /api/events (default: empty in-memory store)
        """
        self.config = config
        self.store = store if store is not None else MemoryCalendarStore()
        self.app = FastAPI(
            title="Vedic Calendar API",
            description="Daily Brahma-muhurta and sandhya windows",
            version=__version__,
        )
        self._setup_routes()

    def _setup_routes(self) -> None:
        """Setup all API routes."""

        @self.app.get("/health")
        async def health():
            return {"status": "ok"}

        @self.app.get("/api/config")
        async def get_config():
            """Get configuration."""
            return self.config.model_dump()

        @self.app.get("/api/sun/{day}")
        async def get_sun(day: str):
            """Sunrise, solar noon and sunset for a date."""
            d = _parse_day(day)
            try:
                inst = SolarCalculator().instants(d, self.config.location, self.config.timezone)
            except VedicCalendarError as e:
                raise HTTPException(status_code=400, detail=str(e))
            return {
                "date": d.isoformat(),
                "sunrise": inst.sunrise.isoformat(),
                "solar_noon": inst.solar_noon.isoformat(),
                "sunset": inst.sunset.isoformat(),
            }

        @self.app.get("/api/windows/{day}")
        async def get_windows(day: str):
            """The four Vedic windows for a date."""
            d = _parse_day(day)
            try:
                windows = compute_daily_vedic_windows(
                    d, self.config.location, self.config.timezone, self.config.periods
                )
            except VedicCalendarError as e:
                logger.warning("Window calculation failed for %s: %s", d, e)
                raise HTTPException(status_code=400, detail=str(e))
            return [w.to_dict() for w in windows]

        @self.app.get("/api/events")
        async def get_events():
            """All stored calendar events."""
            return [e.model_dump(mode="json") for e in self.store.get_all_events()]
