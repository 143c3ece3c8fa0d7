"""NOAA-style sunrise, solar noon and sunset.

All quantities are in minutes from local midnight until the last step, which
turns them into wall-clock datetimes anchored on the requested day.
"""
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
import math
from typing import Optional

from ..model.location import GeoLocation, validate_location
from ..model.windows import SolarInstants
from .timezones import DEFAULT_RESOLVER, TimezoneResolver

# Zenith of the sun's upper limb at rise/set, including refraction
ZENITH_DEG = 90.833
MINUTES_PER_DEGREE = 4.0


def day_of_year(d: date) -> int:
  return d.timetuple().tm_yday


def fractional_year(d: date) -> float:
  return 2 * math.pi / 365 * (day_of_year(d) - 1)


def equation_of_time(gamma: float) -> float:
  return 229.18 * (
    0.000075
    + 0.001868 * math.cos(gamma)
    - 0.032077 * math.sin(gamma)
    - 0.014615 * math.cos(2 * gamma)
    - 0.040849 * math.sin(2 * gamma)
  )


def solar_declination(gamma: float) -> float:
  return (
    0.006918
    - 0.399912 * math.cos(gamma)
    + 0.070257 * math.sin(gamma)
    - 0.006758 * math.cos(2 * gamma)
    + 0.000907 * math.sin(2 * gamma)
    - 0.002697 * math.cos(3 * gamma)
    + 0.00148 * math.sin(3 * gamma)
  )


def hour_angle_minutes(latitude: float, declination: float) -> float:
  lat = math.radians(latitude)
  cos_h = (math.cos(math.radians(ZENITH_DEG)) / (math.cos(lat) * math.cos(declination))
           - math.tan(lat) * math.tan(declination))
  # Polar day/night: no rise or set, collapse instead of failing in acos
  cos_h = min(1.0, max(-1.0, cos_h))
  return math.degrees(math.acos(cos_h)) * MINUTES_PER_DEGREE


def solar_minutes(d: date, latitude: float, longitude: float, utc_offset_minutes: int) -> tuple[float, float, float]:
  gamma = fractional_year(d)
  noon = 720 - MINUTES_PER_DEGREE * longitude - equation_of_time(gamma) + utc_offset_minutes
  ha = hour_angle_minutes(latitude, solar_declination(gamma))
  return noon - ha, noon, noon + ha


def minutes_to_datetime(d: date, minutes: float, tz) -> datetime:
  # Floors the total, not hour and minute separately: -2.85 is 23:57 the day before, not 22:57.
  # Wall-clock arithmetic: values outside [0, 1440) spill into the next/previous day
  midnight = datetime(d.year, d.month, d.day, tzinfo=tz)
  return midnight + timedelta(minutes=math.floor(minutes))


@dataclass
class SolarCalculator:
  resolver: TimezoneResolver = field(default=DEFAULT_RESOLVER)

  def instants(self, d: date, location: GeoLocation, timezone_id: str) -> SolarInstants:
    validate_location(location.latitude, location.longitude)
    tz = self.resolver.tzinfo_for(timezone_id)
    offset = self.resolver.offset_minutes_for(d, timezone_id)
    sunrise, noon, sunset = solar_minutes(d, location.latitude, location.longitude, offset)
    return SolarInstants(
      sunrise=minutes_to_datetime(d, sunrise, tz),
      solar_noon=minutes_to_datetime(d, noon, tz),
      sunset=minutes_to_datetime(d, sunset, tz),
    )


def compute_solar_instants(d: date, location: GeoLocation, timezone_id: str,
                           resolver: Optional[TimezoneResolver] = None) -> SolarInstants:
  return SolarCalculator(resolver or DEFAULT_RESOLVER).instants(d, location, timezone_id)
