from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class PeriodLabel(str, Enum):
  BRAHMA_MUHURTA = "Brahma-muhurta"
  MORNING_SANDHYA = "Morning Sandhya"
  MIDDAY_SANDHYA = "Midday Sandhya"
  EVENING_SANDHYA = "Evening Sandhya"


@dataclass(frozen=True)
class SolarInstants:
  sunrise: datetime
  solar_noon: datetime
  sunset: datetime


@dataclass(frozen=True)
class VedicWindow:
  label: PeriodLabel
  start: datetime
  end: datetime
  anchor: datetime
  description: str = ""

  @property
  def duration_minutes(self) -> int:
    return int((self.end - self.start).total_seconds() // 60)

  def to_dict(self) -> dict:
    return {
      "label": self.label.value,
      "start": self.start.isoformat(),
      "end": self.end.isoformat(),
      "anchor": self.anchor.isoformat(),
      "description": self.description,
    }
