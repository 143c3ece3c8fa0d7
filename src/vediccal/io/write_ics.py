import os
import re
from typing import Iterable

from ics import Calendar, Event
from ics.grammar.parse import ContentLine

from ..model.events import CalendarEvent


def event_uid(key: str) -> str:
  return re.sub(r"[^A-Za-z0-9]+", "-", key).strip("-").lower() + "@vediccal"


def write_ics(events: Iterable[CalendarEvent], path: str, calendar_name: str) -> int:
  cal = Calendar()
  cal.extra.append(ContentLine(name="X-WR-CALNAME", value=calendar_name))
  for ce in events:
    e = Event()
    e.name = ce.title
    e.begin = ce.start
    e.end = ce.end
    e.description = ce.description
    e.location = ce.location
    e.uid = event_uid(ce.key)
    cal.events.add(e)
  os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
  with open(path, "w", encoding="utf-8") as f:
    f.writelines(cal.serialize_iter())
  return len(cal.events)
