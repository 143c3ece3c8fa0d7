"""Daily Vedic sandhya windows from NOAA solar geometry."""

from .errors import InvalidLocation, UnresolvableTimezone, VedicCalendarError
from .model import CalendarConfig, GeoLocation, PeriodConfig, PeriodLabel, SolarInstants, VedicWindow
from .pipeline import compute_daily_vedic_windows

__version__ = "1.0.0"

__all__ = [
  "InvalidLocation",
  "UnresolvableTimezone",
  "VedicCalendarError",
  "CalendarConfig",
  "GeoLocation",
  "PeriodConfig",
  "PeriodLabel",
  "SolarInstants",
  "VedicWindow",
  "compute_daily_vedic_windows",
]
