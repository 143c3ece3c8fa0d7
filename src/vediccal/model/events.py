from datetime import date, datetime

from pydantic import BaseModel

from .windows import PeriodLabel


def event_key(day: date, label: PeriodLabel) -> str:
  return f"{day.isoformat()}/{label.value}"


class CalendarEvent(BaseModel):
  key: str
  title: str
  start: datetime
  end: datetime
  description: str
  location: str
  timezone: str
