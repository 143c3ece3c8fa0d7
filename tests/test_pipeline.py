from datetime import date, timedelta

import pytest

from vediccal import InvalidLocation, PeriodConfig, compute_daily_vedic_windows
from vediccal.model.location import GeoLocation
from vediccal.model.windows import PeriodLabel


def test_tallinn_solstice_windows(tallinn):
  dawn, morning, midday, evening = compute_daily_vedic_windows(
    date(2024, 6, 21), tallinn, "Europe/Tallinn", PeriodConfig()
  )
  sunrise = morning.anchor
  assert dawn.start == sunrise - timedelta(minutes=96)
  assert dawn.end == sunrise - timedelta(minutes=48)
  assert morning.start == sunrise - timedelta(minutes=24)
  assert morning.end == sunrise + timedelta(minutes=24)
  assert midday.start == midday.anchor - timedelta(minutes=24)
  assert midday.end == midday.anchor + timedelta(minutes=24)
  assert evening.start == evening.anchor - timedelta(minutes=24)
  assert evening.end == evening.anchor + timedelta(minutes=24)
  assert "Exact sunset time:" in evening.description


def test_same_inputs_same_outputs(tallinn):
  a = compute_daily_vedic_windows(date(2024, 3, 31), tallinn, "Europe/Tallinn")
  b = compute_daily_vedic_windows(date(2024, 3, 31), tallinn, "Europe/Tallinn")
  assert a == b
  assert len(a) == 4


@pytest.mark.parametrize("lat", [-90, -60, 0, 30, 59.4369, 78.2, 90])
def test_windows_well_formed_all_year(lat):
  loc = GeoLocation(lat, 15.6)
  for month in range(1, 13):
    windows = compute_daily_vedic_windows(date(2025, month, 5), loc, "Europe/Oslo")
    assert [w.label for w in windows] == list(PeriodLabel)
    assert all(w.start <= w.end for w in windows)
    assert windows[0].duration_minutes == 48


def test_invalid_location_raises():
  class Loc:
    latitude = 91.0
    longitude = 0.0

  with pytest.raises(InvalidLocation):
    compute_daily_vedic_windows(date(2024, 6, 21), Loc(), "UTC")
