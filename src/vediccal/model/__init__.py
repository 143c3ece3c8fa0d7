from .config import CalendarConfig, PeriodConfig, load_config
from .events import CalendarEvent, event_key
from .location import GeoLocation
from .windows import PeriodLabel, SolarInstants, VedicWindow

__all__ = [
  "CalendarConfig",
  "PeriodConfig",
  "load_config",
  "CalendarEvent",
  "event_key",
  "GeoLocation",
  "PeriodLabel",
  "SolarInstants",
  "VedicWindow",
]
