from fastapi.testclient import TestClient

from vediccal.api.rest import VedicRestAPI
from vediccal.model.config import CalendarConfig


def _client():
  return TestClient(VedicRestAPI(CalendarConfig()).app)


def test_health():
  assert _client().get("/health").json() == {"status": "ok"}


def test_windows_endpoint():
  r = _client().get("/api/windows/2024-06-21")
  assert r.status_code == 200
  body = r.json()
  assert [w["label"] for w in body] == ["Brahma-muhurta", "Morning Sandhya", "Midday Sandhya", "Evening Sandhya"]
  assert body[0]["start"].startswith("2024-06-21T")


def test_sun_endpoint():
  body = _client().get("/api/sun/2024-06-21").json()
  assert body["sunrise"] < body["solar_noon"] < body["sunset"]


def test_bad_date_is_400():
  assert _client().get("/api/windows/21-06-2024").status_code == 400


def test_events_empty_by_default():
  assert _client().get("/api/events").json() == []
