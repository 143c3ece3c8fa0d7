from datetime import timedelta
from typing import List, Optional

from ..model.config import PeriodConfig
from ..model.windows import PeriodLabel, SolarInstants, VedicWindow
from .formatting import DEFAULT_FORMATTER, TimeFormatter


def _window(label, start, end, anchor, formatter: TimeFormatter) -> VedicWindow:
  return VedicWindow(label, start, end, anchor, formatter.describe(label, start, end, anchor))


def derive_periods(instants: SolarInstants, config: PeriodConfig,
                   formatter: Optional[TimeFormatter] = None) -> List[VedicWindow]:
  """
  Brahma-muhurta plus the three sandhyas, in that order. Every bound is minute
  arithmetic on an already-floored solar instant.
  """
  fmt = formatter or DEFAULT_FORMATTER
  half = timedelta(minutes=config.sandhya_half_width_minutes)
  sunrise, noon, sunset = instants.sunrise, instants.solar_noon, instants.sunset

  dawn_start = sunrise - timedelta(minutes=config.minutes_before_sunrise_for_dawn_period)
  dawn_end = dawn_start + timedelta(minutes=config.dawn_period_duration_minutes)

  # Midday end is derived from its start, not from noon
  noon_start = noon - half
  noon_end = noon_start + 2 * half

  return [
    _window(PeriodLabel.BRAHMA_MUHURTA, dawn_start, dawn_end, sunrise, fmt),
    _window(PeriodLabel.MORNING_SANDHYA, sunrise - half, sunrise + half, sunrise, fmt),
    _window(PeriodLabel.MIDDAY_SANDHYA, noon_start, noon_end, noon, fmt),
    _window(PeriodLabel.EVENING_SANDHYA, sunset - half, sunset + half, sunset, fmt),
  ]
