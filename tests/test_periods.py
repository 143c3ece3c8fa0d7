from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from vediccal.core.formatting import TimeFormatter
from vediccal.core.periods import derive_periods
from vediccal.model.config import PeriodConfig
from vediccal.model.windows import PeriodLabel, SolarInstants

TZ = ZoneInfo("Europe/Tallinn")
INSTANTS = SolarInstants(
  sunrise=datetime(2024, 6, 21, 4, 2, tzinfo=TZ),
  solar_noon=datetime(2024, 6, 21, 13, 22, tzinfo=TZ),
  sunset=datetime(2024, 6, 21, 22, 42, tzinfo=TZ),
)


def test_four_windows_in_order():
  windows = derive_periods(INSTANTS, PeriodConfig())
  assert [w.label for w in windows] == list(PeriodLabel)


def test_default_offsets():
  dawn, morning, midday, evening = derive_periods(INSTANTS, PeriodConfig())
  assert dawn.start == datetime(2024, 6, 21, 2, 26, tzinfo=TZ)
  assert dawn.end == datetime(2024, 6, 21, 3, 14, tzinfo=TZ)
  assert dawn.anchor == INSTANTS.sunrise
  assert (morning.start, morning.end) == (INSTANTS.sunrise - timedelta(minutes=24), INSTANTS.sunrise + timedelta(minutes=24))
  assert (midday.start, midday.end) == (datetime(2024, 6, 21, 12, 58, tzinfo=TZ), datetime(2024, 6, 21, 13, 46, tzinfo=TZ))
  assert (evening.start, evening.end) == (datetime(2024, 6, 21, 22, 18, tzinfo=TZ), datetime(2024, 6, 21, 23, 6, tzinfo=TZ))
  assert evening.anchor == INSTANTS.sunset


def test_durations_match_rules():
  windows = derive_periods(INSTANTS, PeriodConfig())
  assert [w.duration_minutes for w in windows] == [48, 48, 48, 48]
  assert all(w.start <= w.end for w in windows)


def test_half_width_override_leaves_dawn_alone():
  dawn, *sandhyas = derive_periods(INSTANTS, PeriodConfig(sandhya_half_width_minutes=30))
  assert dawn.duration_minutes == 48
  assert dawn.start == INSTANTS.sunrise - timedelta(minutes=96)
  assert [w.duration_minutes for w in sandhyas] == [60, 60, 60]


def test_dawn_overrides():
  cfg = PeriodConfig(minutes_before_sunrise_for_dawn_period=120, dawn_period_duration_minutes=30)
  dawn = derive_periods(INSTANTS, cfg)[0]
  assert dawn.start == datetime(2024, 6, 21, 2, 2, tzinfo=TZ)
  assert dawn.duration_minutes == 30


def test_dawn_can_start_on_previous_day():
  early = SolarInstants(
    sunrise=datetime(2024, 6, 21, 1, 0, tzinfo=TZ),
    solar_noon=datetime(2024, 6, 21, 12, 0, tzinfo=TZ),
    sunset=datetime(2024, 6, 21, 23, 0, tzinfo=TZ),
  )
  dawn = derive_periods(early, PeriodConfig())[0]
  assert dawn.start == datetime(2024, 6, 20, 23, 24, tzinfo=TZ)


def test_descriptions():
  dawn, _, midday, _ = derive_periods(INSTANTS, PeriodConfig(), TimeFormatter("Europe/Tallinn"))
  assert dawn.description == (
    "Brahma-muhurta (time for spiritual practice before dawn): 02:26 - 03:14\n"
    "Sunrise time: 04:02"
  )
  assert midday.description.endswith("Exact solar noon time: 13:22")


def test_derivation_is_pure():
  before = INSTANTS
  a = derive_periods(INSTANTS, PeriodConfig())
  b = derive_periods(INSTANTS, PeriodConfig())
  assert a == b
  assert INSTANTS == before


def test_negative_duration_rejected():
  with pytest.raises(ValidationError):
    PeriodConfig(sandhya_half_width_minutes=-1)


def test_formatter_converts_zone_and_handles_none():
  fmt = TimeFormatter("Asia/Kolkata")
  assert fmt.format_time(datetime(2024, 6, 21, 4, 2, tzinfo=TZ)) == "06:32"
  assert fmt.format_time(None) == "N/A"
  assert fmt.event_title(date(2024, 6, 21), PeriodLabel.EVENING_SANDHYA) == "Evening Sandhya (2024-06-21)"
