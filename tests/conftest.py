
import pytest

from vediccal.model.location import GeoLocation

TALLINN = GeoLocation(59.4369, 24.7536)


@pytest.fixture
def tallinn():
  return TALLINN


@pytest.fixture(autouse=True)
def _no_env_overrides(monkeypatch):
  for var in ("VEDICCAL_TIMEZONE", "VEDICCAL_LATITUDE", "VEDICCAL_LONGITUDE"):
    monkeypatch.delenv(var, raising=False)
