"""Pure calculation core: solar instants and the windows derived from them."""

from .formatting import TimeFormatter
from .periods import derive_periods
from .solar import SolarCalculator, compute_solar_instants
from .timezones import TimezoneResolver, ZoneInfoResolver

__all__ = [
  "TimeFormatter",
  "derive_periods",
  "SolarCalculator",
  "compute_solar_instants",
  "TimezoneResolver",
  "ZoneInfoResolver",
]
