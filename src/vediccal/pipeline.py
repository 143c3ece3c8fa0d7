"""Single entry point tying the calculator and the period rules together."""

from datetime import date
from typing import List, Optional

from .core.formatting import TimeFormatter
from .core.periods import derive_periods
from .core.solar import SolarCalculator
from .core.timezones import DEFAULT_RESOLVER, TimezoneResolver
from .model.config import PeriodConfig
from .model.location import GeoLocation
from .model.windows import VedicWindow


def compute_daily_vedic_windows(
  day: date,
  location: GeoLocation,
  timezone_id: str,
  config: Optional[PeriodConfig] = None,
  resolver: Optional[TimezoneResolver] = None,
  formatter: Optional[TimeFormatter] = None,
) -> List[VedicWindow]:
  instants = SolarCalculator(resolver or DEFAULT_RESOLVER).instants(day, location, timezone_id)
  return derive_periods(instants, config or PeriodConfig(), formatter)
