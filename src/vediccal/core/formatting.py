from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..model.windows import PeriodLabel
from .timezones import DEFAULT_RESOLVER

PURPOSES = {
  PeriodLabel.BRAHMA_MUHURTA: "time for spiritual practice before dawn",
  PeriodLabel.MORNING_SANDHYA: "time for reciting Gayatri mantra at sunrise",
  PeriodLabel.MIDDAY_SANDHYA: "time for reciting Gayatri mantra at noon",
  PeriodLabel.EVENING_SANDHYA: "time for reciting Gayatri mantra at sunset",
}

ANCHOR_CAPTIONS = {
  PeriodLabel.BRAHMA_MUHURTA: "Sunrise time",
  PeriodLabel.MORNING_SANDHYA: "Exact sunrise time",
  PeriodLabel.MIDDAY_SANDHYA: "Exact solar noon time",
  PeriodLabel.EVENING_SANDHYA: "Exact sunset time",
}


@dataclass(frozen=True)
class TimeFormatter:
  """Renders window times and descriptions; keeps text out of the math."""
  timezone_id: Optional[str] = None
  pattern: str = "%H:%M"

  def format_time(self, dt: Optional[datetime]) -> str:
    if dt is None:
      return "N/A"
    if self.timezone_id and dt.tzinfo is not None:
      dt = dt.astimezone(DEFAULT_RESOLVER.tzinfo_for(self.timezone_id))
    return dt.strftime(self.pattern)

  def describe(self, label: PeriodLabel, start: datetime, end: datetime, anchor: datetime) -> str:
    return (
      f"{label.value} ({PURPOSES[label]}): {self.format_time(start)} - {self.format_time(end)}\n"
      f"{ANCHOR_CAPTIONS[label]}: {self.format_time(anchor)}"
    )

  def event_title(self, day: date, label: PeriodLabel) -> str:
    return f"{label.value} ({day.isoformat()})"


DEFAULT_FORMATTER = TimeFormatter()
