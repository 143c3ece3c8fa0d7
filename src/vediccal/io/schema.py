from pydantic import BaseModel

from ..model.windows import VedicWindow


class WindowRow(BaseModel):
  date: str
  label: str
  start: str
  end: str
  anchor: str
  duration_minutes: int


def window_row(day, w: VedicWindow) -> dict:
  return WindowRow(
    date=day.isoformat(),
    label=w.label.value,
    start=w.start.isoformat(),
    end=w.end.isoformat(),
    anchor=w.anchor.isoformat(),
    duration_minutes=w.duration_minutes,
  ).model_dump()
