from dataclasses import dataclass
from datetime import date, timedelta


@dataclass
class Timebase:
  year: int

  def days(self):
    d = date(self.year, 1, 1)
    while d.year == self.year:
      yield d
      d += timedelta(days=1)


def date_range(start: date, count: int):
  for i in range(count):
    yield start + timedelta(days=i)
