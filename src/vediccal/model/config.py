import os
from pathlib import Path
from typing import Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field

from .location import GeoLocation

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "default.yaml"

ENV_OVERRIDES = {
  "VEDICCAL_TIMEZONE": "timezone",
  "VEDICCAL_LATITUDE": "latitude",
  "VEDICCAL_LONGITUDE": "longitude",
}


class PeriodConfig(BaseModel):
  model_config = ConfigDict(frozen=True)

  minutes_before_sunrise_for_dawn_period: int = Field(96, ge=0)
  dawn_period_duration_minutes: int = Field(48, ge=0)
  sandhya_half_width_minutes: int = Field(24, ge=0)


class CalendarConfig(BaseModel):
  model_config = ConfigDict(frozen=True)

  calendar_name: str = "Vedic Calendar"
  location_name: str = "Tallinn, Estonia"
  latitude: float = 59.4369
  longitude: float = 24.7536
  timezone: str = "Europe/Tallinn"
  periods: PeriodConfig = PeriodConfig()
  store_path: str = "out/events.json"
  ics_path: Optional[str] = None

  @property
  def location(self) -> GeoLocation:
    return GeoLocation(self.latitude, self.longitude)


def _merge(base: dict, override: dict) -> dict:
  out = dict(base)
  for k, v in override.items():
    if isinstance(v, dict) and isinstance(out.get(k), dict):
      out[k] = _merge(out[k], v)
    else:
      out[k] = v
  return out


def load_config(path: Optional[str] = None, env: Optional[Mapping[str, str]] = None) -> CalendarConfig:
  """
  Load the packaged defaults, merge the YAML file at `path` over them and
  apply VEDICCAL_* environment overrides last.
  """
  data = yaml.safe_load(DEFAULT_CONFIG_PATH.read_text(encoding="utf-8")) or {}
  if path:
    user = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    data = _merge(data, user)
  env = os.environ if env is None else env
  for var, key in ENV_OVERRIDES.items():
    if env.get(var):
      data[key] = env[var]
  return CalendarConfig(**data)
