from datetime import date, datetime, time, tzinfo
from functools import lru_cache
from typing import Protocol
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..errors import UnresolvableTimezone


class TimezoneResolver(Protocol):
  def offset_minutes_for(self, day: date, timezone_id: str) -> int:
    ...

  def tzinfo_for(self, timezone_id: str) -> tzinfo:
    ...


@lru_cache(maxsize=64)
def _zone(timezone_id: str) -> ZoneInfo:
  try:
    return ZoneInfo(timezone_id)
  except (ZoneInfoNotFoundError, ValueError, TypeError, OSError) as e:
    raise UnresolvableTimezone(timezone_id) from e


class ZoneInfoResolver:
  """Resolves UTC offsets from the IANA database via zoneinfo.

  The offset of a day is the one in effect at local noon, so a DST switch in
  the small hours already applies to that day.
  """

  def tzinfo_for(self, timezone_id: str) -> tzinfo:
    if not isinstance(timezone_id, str) or not timezone_id:
      raise UnresolvableTimezone(timezone_id)
    return _zone(timezone_id)

  def offset_minutes_for(self, day: date, timezone_id: str) -> int:
    tz = self.tzinfo_for(timezone_id)
    offset = datetime.combine(day, time(12, 0), tzinfo=tz).utcoffset()
    return int(offset.total_seconds() // 60)


DEFAULT_RESOLVER = ZoneInfoResolver()
