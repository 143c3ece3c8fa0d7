from dataclasses import dataclass

from ..errors import InvalidLocation


@dataclass(frozen=True)
class GeoLocation:
  latitude: float
  longitude: float

  def __post_init__(self):
    validate_location(self.latitude, self.longitude)


def validate_location(latitude: float, longitude: float) -> None:
  # NaN fails both comparisons, so it lands here too
  try:
    ok = -90.0 <= float(latitude) <= 90.0 and -180.0 <= float(longitude) <= 180.0
  except (TypeError, ValueError):
    ok = False
  if not ok:
    raise InvalidLocation(latitude, longitude)
